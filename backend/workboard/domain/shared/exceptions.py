"""
Domain Exceptions

Defines custom exceptions for domain-specific errors with an error type
discriminator. These exceptions represent business rule violations on the
timeline board and are converted to API payloads via ``to_dict``.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    RESOURCE_CONFLICT = "resource_conflict"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when a field of a work order record is invalid."""

    def __init__(
        self,
        field_name: str,
        value: str | int | float | bool | None,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "VALIDATION_ERROR"

        details: dict[str, str | int | bool | None] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }

        super().__init__(message, ErrorType.VALIDATION, details)

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "field": self.field_name,
            "value": str(self.value) if self.value is not None else None,
            "message": self.message,
            "error_code": self.error_code,
        }


class ResourceConflictError(DomainError):
    """Raised when resource conflicts occur (double booking, etc.)."""

    def __init__(
        self, message: str, details: dict[str, str | int | bool | None] | None = None
    ) -> None:
        super().__init__(message, ErrorType.RESOURCE_CONFLICT, details)


class ConflictError(ResourceConflictError):
    """Raised when a work order would overlap another on the same work center."""

    def __init__(
        self,
        conflicting_id: str,
        conflicting_name: str,
        start_date: str,
        end_date: str,
    ) -> None:
        self.conflicting_id = conflicting_id
        self.conflicting_name = conflicting_name
        self.start_date = start_date
        self.end_date = end_date

        message = (
            f'This time period overlaps with "{conflicting_name}" '
            f"({start_date} - {end_date})"
        )
        super().__init__(
            message,
            {
                "conflicting_id": conflicting_id,
                "conflicting_name": conflicting_name,
                "start_date": start_date,
                "end_date": end_date,
            },
        )


class NotFoundError(DomainError):
    """Raised when a referenced work center or work order does not exist."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with ID {entity_id} not found",
            ErrorType.NOT_FOUND,
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class PersistenceError(DomainError):
    """Raised when a key-value backend cannot read or write."""

    def __init__(self, operation: str, key: str, reason: str) -> None:
        self.operation = operation
        self.key = key
        super().__init__(
            f"Storage {operation} failed for key '{key}': {reason}",
            ErrorType.PERSISTENCE,
            {"operation": operation, "key": key},
        )
