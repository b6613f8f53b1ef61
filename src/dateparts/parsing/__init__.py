"""Template-driven date parsing: positional date strings to local datetimes.

- Functions NEVER raise exceptions - failures are None or errors in a tuple
- Only '/', ' ' and ':' separate tokens

Public API:
    Parsing Functions:
        to_date - Returns datetime | None
        parse_datetime - Returns tuple[datetime | None, tuple[DateParseError, ...]]

    Templates:
        Placeholder - Recognized placeholder tokens (dd, MM, yyyy, hh, mm, ss)
        FormatTemplate - Compiled template with placeholder slots
        compile_template - Cached template compilation
        split_tokens - Separator split shared by templates and inputs

    Type Guards:
        is_valid_date - TypeIs guard for datetime (not None)

Example:
    >>> from dateparts.parsing import parse_datetime, is_valid_date
    >>> result, errors = parse_datetime("15/01/2022", "dd/MM/yyyy")
    >>> if is_valid_date(result):
    ...     year = result.year

Python 3.13+. Uses stdlib only.
"""

from .dates import DateComponents, parse_datetime, to_date
from .guards import is_valid_date
from .template import FormatTemplate, Placeholder, compile_template, split_tokens

__all__ = [
    "DateComponents",
    "FormatTemplate",
    "Placeholder",
    "compile_template",
    "is_valid_date",
    "parse_datetime",
    "split_tokens",
    "to_date",
]
