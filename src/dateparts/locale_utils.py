"""Locale utilities for BCP-47 to POSIX conversion and locale resolution.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from dateparts.constants import FALLBACK_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_candidates",
    "normalize_locale",
    "resolve_babel_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (pt-BR), while Babel/POSIX uses underscores (pt_BR).
    Surrounding whitespace is stripped.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)


def locale_candidates(locale_code: str) -> tuple[str, ...]:
    """List lookup candidates for a locale, most specific first.

    Subtags are dropped from the right one at a time, the way BCP-47
    lookup truncates a language range.

    Example:
        >>> locale_candidates("zh-Hant-TW")
        ('zh_Hant_TW', 'zh_Hant', 'zh')
    """
    parts = [part for part in normalize_locale(locale_code).split("_") if part]
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=128)
def resolve_babel_locale(locale_code: str) -> tuple[Locale, bool]:
    """Resolve a locale code to the closest Babel Locale that exists.

    Tries each candidate from locale_candidates() in order. When none is
    known to Babel, falls back to FALLBACK_LOCALE and logs a warning.
    This function never raises.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Tuple of (locale, is_fallback). is_fallback is True whenever the
        resolved locale is not the one requested (truncated or default).

    Example:
        >>> locale, is_fallback = resolve_babel_locale("pt-XX")
        >>> str(locale), is_fallback
        ('pt', True)
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    for index, candidate in enumerate(locale_candidates(locale_code)):
        try:
            locale = get_babel_locale(candidate)
        except (UnknownLocaleError, ValueError):
            continue
        if index:
            logger.debug("Locale '%s' resolved to '%s'", locale_code, candidate)
        return (locale, index > 0)

    logger.warning("Unknown locale '%s'. Falling back to %s", locale_code, FALLBACK_LOCALE)
    return (get_babel_locale(FALLBACK_LOCALE), True)
