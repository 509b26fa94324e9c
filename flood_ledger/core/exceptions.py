"""
Custom exceptions for the Flood Monitoring Ledger.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class AppException(Exception):
    """Base exception for the Flood Monitoring Ledger."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AppException):
    """Data validation exception."""

    pass


class AuthenticationException(AppException):
    """Caller identity missing."""

    pass


class AuthorizationException(AppException):
    """Caller is not an authorized data provider."""

    pass


class ResourceNotFoundException(AppException):
    """Resource not found exception."""

    pass


_STATUS_BY_EXCEPTION = (
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
    (ValidationException, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationException, status.HTTP_403_FORBIDDEN),
)


def create_http_exception(exc: AppException) -> HTTPException:
    """Convert custom exceptions to HTTP exceptions."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for exc_type, mapped_status in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            status_code = mapped_status
            break

    return HTTPException(
        status_code=status_code,
        detail=exc.message,
        headers={"X-Error-Details": str(exc.details)},
    )
