"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.
    
    Attributes:
        error_type: Stable machine-readable code sent in error responses.
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    error_type = "application_error"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.
        
        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    error_type = "not_found"

    def __init__(self, resource: str, identifier: Any = None, message: Optional[str] = None):
        """Initialize not found error.
        
        Args:
            resource: Type of resource (e.g., 'UserProfile', 'Meal').
            identifier: ID or identifier that was not found.
            message: Optional message overriding the default wording.
        """
        if message is None:
            message = f"{resource} with id '{identifier}' not found"
        details = {"resource": resource}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, status_code=404, details=details)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    error_type = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.
        
        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class UnauthorizedError(AppException):
    """Exception raised when the caller cannot be identified."""

    error_type = "unauthorized"

    def __init__(self, message: str = "Missing or invalid user identity"):
        super().__init__(message, status_code=401)


class ForbiddenError(AppException):
    """Exception raised when acting on a resource owned by another user."""

    error_type = "forbidden"

    def __init__(self, resource: str, identifier: Any):
        """Initialize forbidden error.

        Args:
            resource: Type of resource (e.g., 'MealPlan').
            identifier: ID of the resource the caller does not own.
        """
        message = f"Not allowed to modify {resource} '{identifier}'"
        super().__init__(message, status_code=403, details={"resource": resource, "id": identifier})


class ConflictError(AppException):
    """Exception raised when a write collides with existing state."""

    error_type = "conflict"

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, status_code=409, details=details)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    error_type = "database_error"

    def __init__(self, message: str, operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """Initialize database error.
        
        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
            details: Optional extra context merged into the error details.
        """
        extra = {"operation": operation} if operation else {}
        extra.update(details or {})
        super().__init__(message, status_code=500, details=extra)


class ConfigurationError(AppException):
    """Exception raised when application configuration is invalid."""

    error_type = "configuration_error"

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.
        
        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, status_code=500, details=details)
