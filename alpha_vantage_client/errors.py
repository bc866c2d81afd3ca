"""Error types raised while fetching and decoding Alpha Vantage payloads."""

from typing import Any


class AlphaVantageError(ValueError):
    """Base class for every error raised by this package."""


class MalformedPayloadError(AlphaVantageError):
    """Raised when the payload is not JSON or a block is not a JSON object."""


class MissingKeyError(AlphaVantageError):
    """Raised when an expected key is absent from a payload block."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class FieldTypeError(AlphaVantageError):
    """Raised when a known key holds a value of the wrong JSON type."""

    def __init__(self, field: str, expected: str, value: Any) -> None:
        super().__init__(
            f"expected {expected} for '{field}', got {type(value).__name__}"
        )
        self.field = field
        self.value = value


class FieldParseError(AlphaVantageError):
    """Raised when a timestamp or quoted number cannot be parsed."""

    def __init__(self, field: str, value: Any, reason: str | None = None) -> None:
        message = f"error parsing '{field}': {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.field = field
        self.value = value


class AlphaVantageApiError(AlphaVantageError):
    """Raised when the API answers with an "Error Message" payload."""
