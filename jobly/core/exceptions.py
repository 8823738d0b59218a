"""
Custom Exceptions for Jobly

Domain exceptions carrying the HTTP status they translate to. Repositories
raise them; the exception handlers in jobly.middleware.error_handler turn
them into JSON error responses.
"""

from typing import Optional, Dict, Any
from enum import Enum

from fastapi import status


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    BUSINESS_LOGIC = "business_logic"
    DATABASE = "database"
    SYSTEM = "system"


class BaseApplicationException(Exception):
    """
    Base exception for all application-specific errors.

    Provides structured error information for consistent error handling
    and error responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.category = category
        self.http_status = http_status
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "message": self.message,
            "status": self.http_status,
            "error_code": self.error_code,
            "category": self.category.value,
            "details": self.details,
        }


class BadRequestException(BaseApplicationException):
    """Malformed input, duplicate entity or constraint violation."""

    def __init__(self, message: str = "Bad Request", **kwargs):
        kwargs.setdefault("error_code", "BAD_REQUEST")
        kwargs.setdefault("category", ErrorCategory.VALIDATION)
        super().__init__(
            message=message,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )


class DuplicateEntityException(BadRequestException):
    """Exception for create requests colliding with an existing row."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code="DUPLICATE_ENTITY",
            category=ErrorCategory.BUSINESS_LOGIC,
            **kwargs
        )


class InvalidFilterException(BadRequestException):
    """Exception for contradictory listing filters."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message=message, error_code="INVALID_FILTER", **kwargs)


class NotFoundException(BaseApplicationException):
    """Exception for resource not found errors."""

    def __init__(self, resource_type: str, resource_id: Any = None, **kwargs):
        message = f"No {resource_type}"
        if resource_id is not None:
            message += f": {resource_id}"

        super().__init__(
            message=message,
            error_code="RESOURCE_NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
            http_status=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            **kwargs
        )


class CompanyNotFoundException(NotFoundException):
    """Exception for company not found errors."""

    def __init__(self, handle: str, **kwargs):
        super().__init__(resource_type="company", resource_id=handle, **kwargs)


class JobNotFoundException(NotFoundException):
    """Exception for job not found errors."""

    def __init__(self, job_id: int, **kwargs):
        super().__init__(resource_type="job", resource_id=job_id, **kwargs)


class UnauthorizedException(BaseApplicationException):
    """Exception for missing, invalid or insufficient credentials."""

    def __init__(self, message: str = "Unauthorized", **kwargs):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED",
            category=ErrorCategory.AUTHENTICATION,
            http_status=status.HTTP_401_UNAUTHORIZED,
            **kwargs
        )
