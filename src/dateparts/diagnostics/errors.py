"""dateparts exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateError(Exception):
    """Base exception for all dateparts errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class DateParseError(DateError):
    """Error while parsing a date string against a format template.

    Parse functions never raise this error; they return it in a tuple
    alongside a None result.

    Attributes:
        input_value: The string that failed to parse
        template: The format template used for parsing
        component: The date component that failed ('day', 'month', ...),
            empty when the failure is not tied to a single component

    Example:
        >>> result, errors = parse_datetime("32/01/2022 00:00:00")
        >>> for error in errors:
        ...     print(f"{error.input_value}: {error.component}")
        32/01/2022 00:00:00: day
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        template: str = "",
        component: str = "",
    ) -> None:
        """Initialize DateParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            template: The format template used for parsing
            component: The date component that failed, if any
        """
        super().__init__(message)
        self.input_value = input_value
        self.template = template
        self.component = component


class DateFormatError(DateError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value that callers may display instead
    of the formatted string, so output still contains usable content.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
