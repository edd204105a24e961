"""Domain exception hierarchy."""

from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all plugin errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize domain exception.

        Args:
            message: Human readable error message
            error_code: Machine readable error code (defaults to class name)
            details: Additional structured error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ResourceValidationError(DomainException):
    """Raised when declared configuration does not satisfy the resource schema."""

    def __init__(self, message: str, field_errors: Optional[dict[str, str]] = None) -> None:
        super().__init__(message, details={"fields": field_errors or {}})
        self.field_errors = field_errors or {}


class ConfigurationError(DomainException):
    """Raised when plugin configuration cannot be loaded or is invalid."""


class ResourceOperationError(DomainException):
    """Raised when a lifecycle operation against the remote API fails."""

    def __init__(self, operation: str, resource_type: str, cause: Exception) -> None:
        super().__init__(
            f"Error {operation} {resource_type}: {cause}",
            details={"operation": operation, "cause": type(cause).__name__},
        )
        self.operation = operation
        self.cause = cause


class InfrastructureError(DomainException):
    """Raised for failures in external infrastructure."""
