"""
Domain exceptions for the Master Barang application.

Every failure here is recoverable: callers surface the message to the user
and the catalog state is left as it was before the call.
"""

from typing import Any


class MasterBarangError(Exception):
    """Base exception for all Master Barang errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(MasterBarangError):
    """Base exception for catalog storage operations."""

    pass


class NotFoundError(StorageError):
    """Item id is not present in the catalog."""

    def __init__(self, record_id: str):
        super().__init__(
            f"Item not found: {record_id}",
            code="RECORD_NOT_FOUND",
            details={"record_id": record_id},
        )
        self.record_id = record_id


# Validation Exceptions
class ValidationError(MasterBarangError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )
        self.field = field


class RequiredFieldsError(ValidationError):
    """One or more required item fields are missing or blank."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            field=missing_fields[0],
            message=f"Required fields missing or blank: {', '.join(missing_fields)}",
        )
        self.missing_fields = list(missing_fields)
        self.details["missing_fields"] = self.missing_fields


class ConfigurationError(MasterBarangError):
    """Configuration error."""

    pass
