# app/core/exceptions.py
"""Custom exceptions for the claims intake service.

Every exception carries the HTTP status it maps to; ``app.main`` registers a
single handler that turns them into plain-text responses.
"""

from typing import Optional, Dict, Any


class ClaimsIntakeException(Exception):
    """Base exception for all service errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ClaimsIntakeException):
    """Required configuration is missing or invalid."""

    def __init__(self, setting: str):
        super().__init__(
            message=f"Missing required setting: {setting}",
            error_code="CONFIGURATION_ERROR",
            details={"setting": setting}
        )


# ===================
# Claim Exceptions
# ===================

class ClaimException(ClaimsIntakeException):
    """Base exception for claim-related errors."""
    pass


class ClaimNotFoundError(ClaimException):
    """Claim not found in storage."""

    status_code = 404

    def __init__(self, claim_id: str):
        super().__init__(
            message=f"Claim not found: {claim_id}",
            error_code="CLAIM_NOT_FOUND",
            details={"claim_id": claim_id}
        )


class SearchParametersMissingError(ClaimException):
    """Exact-match search called without all required fields."""

    status_code = 400

    def __init__(self, missing: list):
        super().__init__(
            message="required params missing",
            error_code="SEARCH_PARAMS_MISSING",
            details={"missing": missing}
        )


# ===================
# Auth Exceptions
# ===================

class AuthException(ClaimsIntakeException):
    """Base exception for authentication errors."""
    pass


class NotAuthenticatedError(AuthException):
    """Session token missing or failed verification."""

    status_code = 401

    def __init__(self, reason: str = "missing token"):
        super().__init__(
            message="unauthenticated",
            error_code="UNAUTHENTICATED",
            details={"reason": reason}
        )


class UserNotFoundError(AuthException):
    """No credential record for the supplied user name."""

    status_code = 400

    def __init__(self, user_name: Optional[str]):
        super().__init__(
            message="no user found",
            error_code="USER_NOT_FOUND",
            details={"user_name": user_name}
        )


class RegistrationError(AuthException):
    """Hashing or storing a new credential failed."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(
            message=f"Registration failed: {message}",
            error_code="REGISTRATION_ERROR"
        )


# ===================
# Upstream Exceptions
# ===================

class StorageException(ClaimsIntakeException):
    """Base exception for storage-related errors."""
    pass


class StorageConnectionError(StorageException):
    """Cannot reach the document store."""

    status_code = 503

    def __init__(self, message: str):
        super().__init__(
            message=f"Storage unavailable: {message}",
            error_code="STORAGE_CONNECTION_ERROR"
        )


class ExternalServiceError(ClaimsIntakeException):
    """Maps or places API call failed."""

    status_code = 502

    def __init__(self, service: str, message: str):
        super().__init__(
            message=f"{service} request failed: {message}",
            error_code="EXTERNAL_SERVICE_ERROR",
            details={"service": service}
        )
