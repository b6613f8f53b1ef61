"""Positional format templates.

A template such as "dd/MM/yyyy hh:mm:ss" is split on the separator class
[/ :] into tokens. Tokens equal to a recognized placeholder mark the position
of a date component in the input; any other token is a literal whose content
is ignored (only its position counts).

Known limitation: only '/', ' ' and ':' separate tokens, so "yyyy-MM-dd" is a
single literal token and matches no placeholder.

Thread-safe. Compiled templates are immutable and cached.
"""

import re
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache

from dateparts.constants import MAX_TEMPLATE_CACHE_SIZE, SEPARATOR_CHARS

__all__ = [
    "FormatTemplate",
    "Placeholder",
    "compile_template",
    "split_tokens",
]

_SEPARATOR_RE = re.compile(f"[{re.escape(SEPARATOR_CHARS)}]")


class Placeholder(StrEnum):
    """Recognized placeholder tokens.

    The member name (lowercased) is the DateComponents field it fills.
    """

    DAY = "dd"
    MONTH = "MM"
    YEAR = "yyyy"
    HOUR = "hh"
    MINUTE = "mm"
    SECOND = "ss"

    @property
    def component(self) -> str:
        """Name of the date component this placeholder reads."""
        return self.name.lower()


def split_tokens(value: str) -> list[str]:
    """Split a template or input string on the separator class.

    Contiguous separators are not collapsed, so empty tokens are possible.

    Examples:
        >>> split_tokens("15/01/2022 12:30:45")
        ['15', '01', '2022', '12', '30', '45']
        >>> split_tokens("15//2022")
        ['15', '', '2022']
        >>> split_tokens("")
        ['']
    """
    return _SEPARATOR_RE.split(value)


@dataclass(frozen=True, slots=True)
class FormatTemplate:
    """Compiled positional template.

    Attributes:
        source: Original template string
        tokens: Template split into tokens
        slots: (placeholder, token index) pairs for placeholders present,
            using the first occurrence of each
    """

    source: str
    tokens: tuple[str, ...]
    slots: tuple[tuple[Placeholder, int], ...]

    @property
    def token_count(self) -> int:
        """Number of tokens an input string must split into."""
        return len(self.tokens)

    def index_of(self, placeholder: Placeholder) -> int | None:
        """Token index of a placeholder, or None when absent."""
        for slot, index in self.slots:
            if slot is placeholder:
                return index
        return None


@lru_cache(maxsize=MAX_TEMPLATE_CACHE_SIZE)
def compile_template(template: str) -> FormatTemplate:
    """Compile a template string into a FormatTemplate.

    Results are cached per template string.

    Args:
        template: Template such as "dd/MM/yyyy hh:mm:ss"

    Returns:
        Compiled FormatTemplate

    Example:
        >>> compiled = compile_template("dd/MM/yyyy")
        >>> compiled.index_of(Placeholder.YEAR)
        2
        >>> compiled.index_of(Placeholder.HOUR) is None
        True
    """
    tokens = tuple(split_tokens(template))
    slots = tuple(
        (placeholder, tokens.index(placeholder.value))
        for placeholder in Placeholder
        if placeholder.value in tokens
    )
    return FormatTemplate(source=template, tokens=tokens, slots=slots)
