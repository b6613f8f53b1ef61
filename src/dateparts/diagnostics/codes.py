"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parsing errors (template-driven date parsing)
        2000-2999: Formatting errors (locale-aware display)
    """

    # Parsing errors (1000-1999)
    PARSE_INPUT_INVALID = 1001
    PARSE_TOKEN_COUNT_MISMATCH = 1002
    PARSE_COMPONENT_INVALID = 1003
    PARSE_COMPONENT_OUT_OF_RANGE = 1004
    PARSE_DATETIME_UNREPRESENTABLE = 1005

    # Formatting errors (2000-2999)
    FORMAT_VALUE_INVALID = 2001
    FORMATTING_FAILED = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        component: Date component involved (e.g., "day", "month")
        template: Format template in effect when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    component: str | None = None
    template: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[PARSE_TOKEN_COUNT_MISMATCH]: Input '15/01/2022' has 3 token(s), ...
              --> template 'dd/MM/yyyy hh:mm:ss'
              = help: Separate components with '/', ' ' or ':' exactly as the template does

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
