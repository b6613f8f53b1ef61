"""Formatting runtime package.

Provides locale-aware date formatting through LocaleContext and strf_date.

Python 3.13+.
"""

from .functions import strf_date
from .locale_context import LocaleContext

__all__ = [
    "LocaleContext",
    "strf_date",
]
