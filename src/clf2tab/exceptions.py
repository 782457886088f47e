"""
Custom exceptions for the conversion module.

Per-line validation failures are not exceptions; they are returned as
FieldFailure values. The classes here cover malformed timestamps (caught
inside the tokenizer) and errors that stop a run before any line is read.
"""


class ConversionError(Exception):
    """
    Base exception for all conversion-related errors.

    All other clf2tab exceptions inherit from this class,
    allowing for broad exception catching when needed.
    """

    pass


class TimestampFormatError(ConversionError, ValueError):
    """
    Raised when a bracketed timestamp does not match the Apache shape.

    Attributes:
        value: The raw timestamp text
        message: Detailed error message
    """

    def __init__(self, message: str, value: str | None = None):
        self.value = value
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with the offending value."""
        if self.value is not None:
            return f"{self.message} (value={self.value!r})"
        return self.message


class SettingsError(ConversionError):
    """
    Raised when configuration cannot be loaded or is invalid.

    Attributes:
        errors: Individual validation problems
        source: Where the configuration came from (optional)
    """

    def __init__(
        self,
        errors: list[str],
        source: str | None = None,
    ):
        self.errors = errors
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with source context."""
        details = "; ".join(self.errors) if self.errors else "unknown error"
        if self.source:
            return f"Invalid configuration in {self.source}: {details}"
        return f"Invalid configuration: {details}"
