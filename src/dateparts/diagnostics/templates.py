"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _SEPARATOR_HINT = "Separate components with '/', ' ' or ':' exactly as the template does"

    @staticmethod
    def parse_input_invalid(argument: str, received_type: str) -> Diagnostic:
        """Parser argument is not a string.

        Args:
            argument: Name of the offending argument ("value" or "template")
            received_type: Type name actually received

        Returns:
            Diagnostic for PARSE_INPUT_INVALID
        """
        msg = f"Expected string for '{argument}', got {received_type}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_INVALID,
            message=msg,
            hint="Pass the date and the template as str",
        )

    @staticmethod
    def parse_token_count_mismatch(
        value: str,
        template: str,
        value_count: int,
        template_count: int,
    ) -> Diagnostic:
        """Input and template split into a different number of tokens.

        Args:
            value: The input string that failed to parse
            template: The format template
            value_count: Number of tokens in the input
            template_count: Number of tokens in the template

        Returns:
            Diagnostic for PARSE_TOKEN_COUNT_MISMATCH
        """
        msg = (
            f"Input '{value}' has {value_count} token(s), "
            f"template '{template}' expects {template_count}"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_TOKEN_COUNT_MISMATCH,
            message=msg,
            hint=ErrorTemplate._SEPARATOR_HINT,
            template=template,
        )

    @staticmethod
    def parse_component_invalid(
        value: str,
        template: str,
        component: str,
        token: str,
    ) -> Diagnostic:
        """A component token is not a base-10 integer.

        Args:
            value: The input string that failed to parse
            template: The format template
            component: Component name (day, month, year, hour, minute, second)
            token: The offending token

        Returns:
            Diagnostic for PARSE_COMPONENT_INVALID
        """
        msg = f"Invalid {component} '{token}' in '{value}': not an integer"
        return Diagnostic(
            code=DiagnosticCode.PARSE_COMPONENT_INVALID,
            message=msg,
            hint="Components must be written with ASCII digits only",
            component=component,
            template=template,
        )

    @staticmethod
    def parse_component_out_of_range(
        value: str,
        template: str,
        component: str,
        expected: int,
        actual: int,
    ) -> Diagnostic:
        """A component rolled over when the date was constructed.

        Args:
            value: The input string that failed to parse
            template: The format template
            component: First component that differs after construction
            expected: Value read from the input
            actual: Value found on the constructed date

        Returns:
            Diagnostic for PARSE_COMPONENT_OUT_OF_RANGE
        """
        msg = (
            f"Date '{value}' does not exist: {component} {expected} "
            f"rolled over to {actual}"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_COMPONENT_OUT_OF_RANGE,
            message=msg,
            hint="Check month length, leap years and daylight saving transitions",
            component=component,
            template=template,
        )

    @staticmethod
    def parse_datetime_unrepresentable(
        value: str,
        template: str,
        reason: str,
    ) -> Diagnostic:
        """Components fall outside the range a datetime can hold.

        Args:
            value: The input string that failed to parse
            template: The format template
            reason: Underlying error text

        Returns:
            Diagnostic for PARSE_DATETIME_UNREPRESENTABLE
        """
        msg = f"Date '{value}' cannot be represented: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DATETIME_UNREPRESENTABLE,
            message=msg,
            hint="Years must lie between 1 and 9999",
            template=template,
        )

    @staticmethod
    def format_value_invalid(value: str) -> Diagnostic:
        """String passed to the formatter is not ISO 8601.

        Args:
            value: The offending string

        Returns:
            Diagnostic for FORMAT_VALUE_INVALID
        """
        msg = f"Invalid datetime string '{value}': not ISO 8601 format"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_VALUE_INVALID,
            message=msg,
            hint="Pass a date/datetime object or an ISO 8601 string",
        )

    @staticmethod
    def formatting_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Babel failed to format a valid value.

        Args:
            value: ISO form of the value being formatted
            locale_code: Locale requested by the caller
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Date formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
        )
