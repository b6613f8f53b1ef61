"""Locale-aware date formatting functions.

Python-native API around LocaleContext. The locale is resolved and cached
per call site argument; formatting itself is delegated to Babel.

Python 3.13+. Uses Babel for i18n.
"""

from datetime import date, datetime

from dateparts.constants import DEFAULT_LOCALE

from .locale_context import LocaleContext

__all__ = ["strf_date"]


def strf_date(
    value: date | datetime | str,
    show_time: bool = False,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Format a date into a localized display string.

    Day and month are always two digits and the year is numeric. With
    show_time, hour, minute and second are added as two-digit fields.
    Ordering and separators follow the locale's CLDR conventions.

    Args:
        value: date, datetime or ISO 8601 string
        show_time: Include the time of day (default: False)
        locale: BCP 47 locale tag (default: "pt-BR"). Unknown tags fall
            back to their language, then to en_US.

    Returns:
        Formatted date string

    Raises:
        DateFormatError: If a string value is not ISO 8601

    Examples:
        >>> strf_date(datetime(2022, 1, 15))
        '15/01/2022'
        >>> strf_date(datetime(2022, 1, 15, 12, 30, 45), show_time=True)
        '15/01/2022 12:30:45'
        >>> strf_date(datetime(2022, 1, 15), locale="en-US")
        '01/15/2022'

    Thread Safety:
        Thread-safe. Uses Babel (no global locale state mutation).
    """
    # create() always succeeds, falling back for unknown locales
    ctx = LocaleContext.create(locale)
    return ctx.format_date(value, show_time=show_time)
