"""Shared constants for dateparts.

This module provides centralized configuration constants used across
the parsing and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Template defaults: Default positional template and separator class
- Component defaults: Values used when a placeholder is absent
- Locale defaults: Default display locale and last-resort fallback
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template defaults
    "DEFAULT_FORMAT",
    "SEPARATOR_CHARS",
    # Component defaults
    "DEFAULT_DAY",
    "DEFAULT_MONTH",
    "DEFAULT_YEAR",
    "DEFAULT_HOUR",
    "DEFAULT_MINUTE",
    "DEFAULT_SECOND",
    # Locale defaults
    "DEFAULT_LOCALE",
    "FALLBACK_LOCALE",
    "DATETIME_COMBINATION_FALLBACK",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_TEMPLATE_CACHE_SIZE",
]

# ============================================================================
# TEMPLATE DEFAULTS
# ============================================================================

# Template used when the caller supplies none.
DEFAULT_FORMAT: str = "dd/MM/yyyy hh:mm:ss"

# Characters that split both templates and input strings into tokens.
# Hyphens and dots are NOT separators: "yyyy-MM-dd" is a single literal token.
SEPARATOR_CHARS: str = "/ :"

# ============================================================================
# COMPONENT DEFAULTS
# ============================================================================
#
# Applied when the corresponding placeholder is absent from the template.
# DEFAULT_MONTH is zero-based (0 = January).

DEFAULT_DAY: int = 1
DEFAULT_MONTH: int = 0
DEFAULT_YEAR: int = 1970
DEFAULT_HOUR: int = 0
DEFAULT_MINUTE: int = 0
DEFAULT_SECOND: int = 0

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# BCP-47 tag used by strf_date() when no locale is given.
DEFAULT_LOCALE: str = "pt-BR"

# Last-resort locale when no prefix of the requested tag is known to Babel.
FALLBACK_LOCALE: str = "en_US"

# CLDR combination pattern used when the locale defines none.
# {1} is the date, {0} is the time (CLDR convention).
DATETIME_COMBINATION_FALLBACK: str = "{1} {0}"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of LocaleContext instances kept in the LRU cache.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum number of compiled format templates kept in the LRU cache.
# Applications typically use a handful of templates; the bound only
# protects against callers building templates from untrusted input.
MAX_TEMPLATE_CACHE_SIZE: int = 256
