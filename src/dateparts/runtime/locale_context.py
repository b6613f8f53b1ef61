"""Locale context for thread-safe, locale-scoped date formatting.

This module provides locale-aware formatting without global state mutation.
Uses Babel for CLDR-compliant date and time formatting.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)

Numeric Display:
    The locale's CLDR patterns decide field order and separators. Field widths
    are then fixed: two-digit day and month, full numeric year, and two-digit
    hour, minute and second. This matches Intl.DateTimeFormat with
    {day: "2-digit", month: "2-digit", year: "numeric"} options.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import lru_cache
from threading import RLock
from typing import ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from dateparts.constants import DATETIME_COMBINATION_FALLBACK, MAX_LOCALE_CACHE_SIZE
from dateparts.diagnostics import DateFormatError, ErrorTemplate
from dateparts.locale_utils import get_babel_locale, normalize_locale, resolve_babel_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for date formatting.

    Use LocaleContext.create() factory to construct instances with proper
    validation and caching.

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('pt-BR')
        >>> ctx.format_date(datetime(2022, 1, 15))
        '15/01/2022'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_date(datetime(2022, 1, 15))
        '15.01.2022'

        >>> # Unknown locales fall back with a warning logged
        >>> ctx = LocaleContext.create('xx-UNKNOWN')
        >>> ctx.locale_code  # Original code preserved
        'xx-UNKNOWN'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Cache operations are
        protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create('pt-BR')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('pt_BR',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for unknown locales.

        Unknown tags are truncated subtag by subtag ("pt-XX" resolves to "pt");
        when nothing matches, en_US is used and a warning is logged.
        This method always succeeds - use create_or_raise() for strict validation.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'pt-BR', 'en-US')

        Returns:
            LocaleContext instance, possibly shared with earlier callers
            that used an equivalent locale code.
        """
        # "pt-BR" and "pt_BR" share a cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        babel_locale, used_fallback = resolve_babel_locale(locale_code)
        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have inserted meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier

        Returns:
            LocaleContext instance with the exact locale requested

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale used for formatting."""
        return self._babel_locale

    @property
    def date_pattern(self) -> str:
        """Locale's short date pattern with two-digit day/month and full year."""
        return _numeric_patterns(str(self._babel_locale))[0]

    @property
    def time_pattern(self) -> str:
        """Locale's medium time pattern with two-digit hour, minute and second."""
        return _numeric_patterns(str(self._babel_locale))[1]

    @property
    def datetime_combination(self) -> str:
        """CLDR pattern joining date ({1}) and time ({0})."""
        return _numeric_patterns(str(self._babel_locale))[2]

    def format_date(self, value: date | datetime | str, *, show_time: bool = False) -> str:
        """Format a date with locale-specific ordering and separators.

        Args:
            value: date, datetime or ISO 8601 string. Strings are converted
                via datetime.fromisoformat().
            show_time: Include hour, minute and second (default: False).
                A plain date is shown at midnight.

        Returns:
            Formatted string according to locale rules

        Raises:
            DateFormatError: If a string value is not ISO 8601, or Babel
                rejects the value. The error carries a fallback_value.

        Examples:
            >>> ctx = LocaleContext.create('pt-BR')
            >>> ctx.format_date(datetime(2022, 1, 15, 12, 30, 45), show_time=True)
            '15/01/2022 12:30:45'

            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_date(datetime(2022, 1, 15))
            '01/15/2022'
        """
        dt_value: date

        if isinstance(value, str):
            try:
                dt_value = datetime.fromisoformat(value)
            except ValueError as e:
                raise DateFormatError(
                    ErrorTemplate.format_value_invalid(value), fallback_value=value
                ) from e
        else:
            dt_value = value

        if show_time and not isinstance(dt_value, datetime):
            dt_value = datetime.combine(dt_value, time())

        try:
            date_str = str(
                babel_dates.format_date(
                    dt_value,
                    format=self.date_pattern,
                    locale=self._babel_locale,
                )
            )
            if not show_time:
                return date_str

            time_str = str(
                babel_dates.format_time(
                    dt_value,
                    format=self.time_pattern,
                    locale=self._babel_locale,
                )
            )
            # Same substitution Babel applies for its own datetime styles;
            # quotes only delimit literals in CLDR combination patterns
            return (
                self.datetime_combination.replace("'", "")
                .replace("{0}", time_str)
                .replace("{1}", date_str)
            )

        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            fallback = dt_value.isoformat()
            logger.debug("Formatting failed for %s in %s: %s", fallback, self.locale_code, e)
            raise DateFormatError(
                ErrorTemplate.formatting_failed(fallback, self.locale_code, str(e)),
                fallback_value=fallback,
            ) from e


# ==============================================================================
# CLDR PATTERN WIDENING
# ==============================================================================
#
# CLDR short date patterns mix field widths ("M/d/yy" for en_US, "dd/MM/y" for
# pt_BR). Widening keeps each locale's order, separators and literals and only
# rewrites numeric field widths:
#
#   Field   | Widened to | Note
#   --------|------------|---------------------------------------
#   d       | dd         | day of month
#   M, L    | MM         | numeric month; MMM and longer are names, kept
#   y, yy   | y          | full year, no padding
#   H h K k | doubled    | hour; the locale's hour cycle is kept
#   m, s    | mm, ss     | minute, second
#
# Every other field (era, AM/PM marker, weekday) passes through unchanged.
# ==============================================================================

_DOUBLED_FIELDS: frozenset[str] = frozenset("dHhKkms")


def _tokenize_pattern(pattern: str) -> list[tuple[str, bool]]:
    """Tokenize a CLDR pattern into (text, is_field) pairs.

    CLDR quote escaping rules:
    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote

    Examples:
        "dd/MM/y" -> [("dd", True), ("/", False), ("MM", True), ("/", False), ("y", True)]
        "d 'de' MMMM" -> [("d", True), (" ", False), ("de", False), (" ", False), ("MMMM", True)]
    """
    tokens: list[tuple[str, bool]] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                tokens.append(("'", False))
                i += 2
                continue

            i += 1  # Skip opening quote
            literal_chars: list[str] = []
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal_chars.append("'")
                        i += 2
                    else:
                        i += 1
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1

            if literal_chars:
                tokens.append(("".join(literal_chars), False))
            continue

        # Pattern letters are ASCII a-z / A-Z; runs of the same letter form a field
        if char.isascii() and char.isalpha():
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            tokens.append((pattern[i:j], True))
            i = j
            continue

        tokens.append((char, False))
        i += 1

    return tokens


def _widen_field(field: str) -> str:
    """Rewrite one CLDR field to its fixed numeric width."""
    letter = field[0]
    if letter in ("M", "L"):
        return field if len(field) > 2 else "MM"
    if letter == "y":
        return "y"
    if letter in _DOUBLED_FIELDS:
        return letter * 2
    return field


def _quote_literal(text: str) -> str:
    """Quote literal text that would otherwise read as pattern letters."""
    if "'" in text or any(char.isascii() and char.isalpha() for char in text):
        return "'" + text.replace("'", "''") + "'"
    return text


def _widen_pattern(pattern: str) -> str:
    """Apply _widen_field to every field of a CLDR pattern.

    Examples:
        "M/d/yy" -> "MM/dd/y"
        "h:mm:ss a" -> "hh:mm:ss a"
    """
    return "".join(
        _widen_field(text) if is_field else _quote_literal(text)
        for text, is_field in _tokenize_pattern(pattern)
    )


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _numeric_patterns(locale_id: str) -> tuple[str, str, str]:
    """Widened (date, time, combination) patterns for a locale, cached per locale."""
    locale = get_babel_locale(locale_id)
    date_pattern = _widen_pattern(locale.date_formats["short"].pattern)
    time_pattern = _widen_pattern(locale.time_formats["medium"].pattern)
    combination = (
        locale.datetime_formats.get("short")
        or locale.datetime_formats.get("medium")
        or DATETIME_COMBINATION_FALLBACK
    )
    return (date_pattern, time_pattern, str(combination))
