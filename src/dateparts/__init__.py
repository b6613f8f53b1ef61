"""dateparts - Positional date parsing and locale-aware date display.

Two stateless operations:
    to_date - Parse "15/01/2022 12:30:45"-style strings against a positional
        template ("dd/MM/yyyy hh:mm:ss") into a local-time datetime
    strf_date - Format a date for display with CLDR locale conventions

Public API:
    to_date - Parse to datetime, or None when invalid
    parse_datetime - Parse with structured errors: (datetime | None, errors)
    strf_date - Locale-aware formatting (default locale pt-BR)
    LocaleContext - Cached, immutable per-locale formatter

Exceptions:
    DateError - Base exception class
    DateParseError - Parse failures (returned, never raised)
    DateFormatError - Formatting failures (raised, with fallback_value)

Submodules:
    dateparts.parsing - Templates, components and type guards
    dateparts.runtime - LocaleContext and formatting functions
    dateparts.diagnostics - Diagnostic codes, templates and formatter
    dateparts.locale_utils - Locale normalization and resolution
"""

from .diagnostics import DateError, DateFormatError, DateParseError
from .parsing import parse_datetime, to_date
from .runtime import LocaleContext, strf_date

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("dateparts")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateError",
    "DateFormatError",
    "DateParseError",
    "LocaleContext",
    "__version__",
    "parse_datetime",
    "strf_date",
    "to_date",
]
