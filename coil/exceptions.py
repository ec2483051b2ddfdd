"""
Custom Exception Classes for Coil admin screens

Most admin handlers fail silently (missing permission, missing field, unknown
screen). The exceptions below cover the cases that must abort the request.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in error responses."""

    AUTH_REQUIRED = "AUTH_REQUIRED"
    AUTH_PERMISSION_DENIED = "AUTH_PERMISSION_DENIED"
    NONCE_INVALID = "NONCE_INVALID"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_POST_NOT_FOUND = "RESOURCE_POST_NOT_FOUND"
    RESOURCE_SETTING_NOT_FOUND = "RESOURCE_SETTING_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class CoilError(Exception):
    """Base exception class for all Coil admin exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Authentication & Authorization Exceptions
# ============================================================================


class AuthenticationError(CoilError):
    """Raised when no acting user can be resolved for an admin request"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED, error_code=ErrorCode.AUTH_REQUIRED)


class AuthorizationError(CoilError):
    """Raised when user lacks permission for an action"""

    def __init__(
        self, message: str = "You do not have permission to perform this action", required_permission: str | None = None
    ):
        details = {"required_permission": required_permission} if required_permission else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            error_code=ErrorCode.AUTH_PERMISSION_DENIED,
            details=details,
        )


class NonceVerificationError(CoilError):
    """Raised when a submitted nonce does not verify for its action"""

    def __init__(self, action: str, message: str = "The link you followed has expired."):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            error_code=ErrorCode.NONCE_INVALID,
            details={"action": action},
        )


# ============================================================================
# Resource Not Found Exceptions
# ============================================================================


class ResourceNotFoundError(CoilError):
    """Base class for resource not found errors"""

    def __init__(
        self,
        resource_type: str,
        resource_id: Any | None = None,
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
    ):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message = f"{resource_type} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=error_code,
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class PostNotFoundError(ResourceNotFoundError):
    """Raised when a post is not found"""

    def __init__(self, post_id: Any | None = None):
        super().__init__(resource_type="Post", resource_id=post_id, error_code=ErrorCode.RESOURCE_POST_NOT_FOUND)


class CustomizerSettingNotFoundError(ResourceNotFoundError):
    """Raised when a customizer setting id has not been registered"""

    def __init__(self, setting_id: str):
        super().__init__(
            resource_type="Customizer setting",
            resource_id=setting_id,
            error_code=ErrorCode.RESOURCE_SETTING_NOT_FOUND,
        )
