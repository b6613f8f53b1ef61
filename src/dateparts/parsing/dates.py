"""Template-driven date parsing.

- to_date() returns datetime | None
- parse_datetime() returns tuple[datetime | None, tuple[DateParseError, ...]]
- Functions NEVER raise, errors are returned in the tuple

Local Time:
    Parsed values are timezone-aware datetimes in the local timezone of the
    running process. No timezone conversion is performed: the wall-clock
    fields of the result are the ones read from the input.

Validation by Reconstruction:
    Components are not checked against a calendar table. The datetime is
    built with rollover semantics (day 32 of January becomes 1 February,
    hour 24 becomes midnight of the next day) and the six fields are read
    back. Any difference means the input named a moment that does not exist,
    which covers month lengths, leap years and wall-clock times skipped by
    daylight saving transitions.

Thread-safe. Uses Python 3.13 stdlib only.
"""

import logging
import re
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta

from dateparts.constants import (
    DEFAULT_DAY,
    DEFAULT_FORMAT,
    DEFAULT_HOUR,
    DEFAULT_MINUTE,
    DEFAULT_MONTH,
    DEFAULT_SECOND,
    DEFAULT_YEAR,
)
from dateparts.diagnostics import DateParseError, Diagnostic, ErrorTemplate

from .template import Placeholder, compile_template, split_tokens

__all__ = ["DateComponents", "parse_datetime", "to_date"]

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits. int() alone would also accept
# whitespace, underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class DateComponents:
    """The six numeric fields of a date, as read from an input string.

    Attributes:
        day: Day of month
        month: Month, zero-based (0 = January)
        year: Full year
        hour: Hour (0-23)
        minute: Minute
        second: Second

    Fields may hold out-of-range values; to_datetime() rolls them over.
    """

    day: int = DEFAULT_DAY
    month: int = DEFAULT_MONTH
    year: int = DEFAULT_YEAR
    hour: int = DEFAULT_HOUR
    minute: int = DEFAULT_MINUTE
    second: int = DEFAULT_SECOND

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateComponents":
        """Read the six fields back from a datetime (month made zero-based)."""
        return cls(
            day=value.day,
            month=value.month - 1,
            year=value.year,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )

    def to_datetime(self) -> datetime:
        """Build a local-time datetime, propagating overflow into larger fields.

        Raises:
            ValueError: Resulting year outside 1-9999
            OverflowError: Components too large for datetime arithmetic
            OSError: Platform cannot resolve the local timezone for the value
        """
        year_carry, month_index = divmod(self.month, 12)
        naive = datetime(self.year + year_carry, month_index + 1, 1) + timedelta(
            days=self.day - 1,
            hours=self.hour,
            minutes=self.minute,
            seconds=self.second,
        )
        return naive.astimezone()

    def first_difference(self, other: "DateComponents") -> tuple[str, int, int] | None:
        """Return (field, own value, other value) for the first differing field."""
        own = asdict(self)
        theirs = asdict(other)
        for field in ("day", "month", "year", "hour", "minute", "second"):
            if own[field] != theirs[field]:
                return (field, own[field], theirs[field])
        return None


def parse_datetime(
    value: str,
    template: str = DEFAULT_FORMAT,
) -> tuple[datetime | None, tuple[DateParseError, ...]]:
    """Parse a date string according to a positional format template.

    Valid placeholders are "dd", "MM", "yyyy", "hh", "mm" and "ss". Every
    other template token is a literal whose position, not content, matters.
    Placeholders absent from the template take their default value
    (1 January 1970, 00:00:00).

    Args:
        value: Date string (e.g., "15/01/2022 12:30:45")
        template: Positional template (default: "dd/MM/yyyy hh:mm:ss")

    Returns:
        Tuple of (result, errors):
        - result: Local-time aware datetime, or None if parsing failed
        - errors: Tuple of DateParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_datetime("15/01/2022 12:30:45")
        >>> result.replace(tzinfo=None)
        datetime.datetime(2022, 1, 15, 12, 30, 45)
        >>> errors
        ()

        >>> result, errors = parse_datetime("32/01/2022 00:00:00")
        >>> result is None
        True
        >>> errors[0].component
        'day'

    Thread Safety:
        Thread-safe. No shared mutable state.
    """
    # Runtime defense for untyped callers
    if not isinstance(value, str):
        diagnostic = ErrorTemplate.parse_input_invalid(  # type: ignore[unreachable]
            "value", type(value).__name__
        )
        return _failure(diagnostic, str(value), str(template))
    if not isinstance(template, str):
        diagnostic = ErrorTemplate.parse_input_invalid(  # type: ignore[unreachable]
            "template", type(template).__name__
        )
        return _failure(diagnostic, value, str(template))

    compiled = compile_template(template)
    tokens = split_tokens(value)

    if len(tokens) != compiled.token_count:
        diagnostic = ErrorTemplate.parse_token_count_mismatch(
            value, template, len(tokens), compiled.token_count
        )
        return _failure(diagnostic, value, template)

    fields: dict[str, int] = {}
    for placeholder, index in compiled.slots:
        token = tokens[index]
        number = _parse_integer(token)
        if number is None:
            diagnostic = ErrorTemplate.parse_component_invalid(
                value, template, placeholder.component, token
            )
            return _failure(diagnostic, value, template, placeholder.component)
        if placeholder is Placeholder.MONTH:
            number -= 1
        fields[placeholder.component] = number

    components = DateComponents(**fields)
    logger.debug("Parsed components for '%s': %s", value, components)

    try:
        constructed = components.to_datetime()
    except (ValueError, OverflowError, OSError) as e:
        diagnostic = ErrorTemplate.parse_datetime_unrepresentable(value, template, str(e))
        return _failure(diagnostic, value, template)

    difference = components.first_difference(DateComponents.from_datetime(constructed))
    if difference is not None:
        component, expected, actual = difference
        if component == "month":
            # Report months the way the input writes them
            expected, actual = expected + 1, actual + 1
        diagnostic = ErrorTemplate.parse_component_out_of_range(
            value, template, component, expected, actual
        )
        return _failure(diagnostic, value, template, component)

    return (constructed, ())


def to_date(value: str, template: str = DEFAULT_FORMAT) -> datetime | None:
    """Parse a date string into a local-time datetime, or None if invalid.

    WARNING: The returned datetime is in the local timezone.

    Shorthand for parse_datetime() when the reason for a failure is not
    needed. Never raises.

    Args:
        value: Date string to parse
        template: Positional template (default: "dd/MM/yyyy hh:mm:ss")

    Returns:
        Parsed datetime, or None when the input does not match the template
        or names a date that does not exist.

    Examples:
        >>> to_date("15/01/2022 12:30:45").day
        15
        >>> to_date("2022-01-15", "yyyy-MM-dd").year  # '-' does not separate tokens
        1970
        >>> to_date("15/01/2022") is None  # 3 tokens, default template has 6
        True
    """
    result, _ = parse_datetime(value, template)
    return result


def _parse_integer(token: str) -> int | None:
    """Parse a base-10 integer token strictly, returning None if invalid."""
    if not _INTEGER_RE.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None


def _failure(
    diagnostic: Diagnostic,
    value: str,
    template: str,
    component: str = "",
) -> tuple[None, tuple[DateParseError, ...]]:
    """Build the failure result and trace it at debug level."""
    logger.debug("Rejected date '%s': %s", value, diagnostic.message)
    error = DateParseError(
        diagnostic,
        input_value=value,
        template=template,
        component=component,
    )
    return (None, (error,))
