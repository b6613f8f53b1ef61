"""Type guard functions for parsing result type narrowing.

Provides TypeIs-based type guards for mypy to narrow parsing result types safely.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from dateparts.parsing import parse_datetime
    >>> from dateparts.parsing.guards import is_valid_date
    >>> result, errors = parse_datetime("15/01/2022 12:30:45")
    >>> if is_valid_date(result):
    ...     # mypy knows result is datetime
    ...     timestamp = result.timestamp()
"""

from datetime import datetime
from typing import TypeIs

__all__ = ["is_valid_date"]


def is_valid_date(value: datetime | None) -> TypeIs[datetime]:
    """Type guard: Check if a parse result is a datetime (not None).

    Safe to call directly on to_date() or parse_datetime() results
    without checking errors first.

    Args:
        value: Result from to_date() or parse_datetime() (may be None on error)

    Returns:
        True if value is a datetime object, False otherwise
    """
    return value is not None
