"""
Custom exceptions for the schema data generator.

Generation itself never raises for a malformed field or rule; these
exceptions cover the input boundary (rule parsing, mapping extraction)
and configuration loading.
"""

from typing import Any


class SchemaDataGenException(Exception):
    """Base exception for all schema data generator errors."""

    pass


class MappingError(SchemaDataGenException):
    """Exception raised when a mapping source response cannot be used."""

    def __init__(self, message: str, index: str | None = None):
        self.index = index

        if index:
            message = f"Mapping error for index '{index}': {message}"

        super().__init__(message)


class InvalidRuleError(SchemaDataGenException):
    """Exception raised when a field rule object fails validation."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        invalid_value: Any | None = None,
        validation_errors: list[str] | None = None,
    ):
        self.field_path = field_path
        self.invalid_value = invalid_value
        self.validation_errors = validation_errors or []

        error_parts = [message]

        if field_path:
            error_parts.append(f"Field: {field_path}")

        if invalid_value is not None:
            error_parts.append(f"Value: {invalid_value}")

        if validation_errors:
            error_parts.extend(
                [f"Validation error: {error}" for error in validation_errors]
            )

        super().__init__(" | ".join(error_parts))


class BulkRequestError(SchemaDataGenException):
    """Exception raised by a bulk sender when a whole chunk request fails."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code

        if status_code is not None:
            message = f"{message} (HTTP {status_code})"

        super().__init__(message)

    @property
    def is_transient(self) -> bool:
        return self.status_code in (429, 503)
