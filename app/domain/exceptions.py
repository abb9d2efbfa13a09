"""
Exception taxonomy for the social backend.

Raised by use cases and the auth gate; the API layer maps each one to the
status code and envelope of the route that raised it.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class SocialBackendError(Exception):
    """Base exception for all social backend errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationConflict(SocialBackendError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: Optional[str] = None):
        super().__init__("User already exists", details={"username": username})


# -----------------------------------------------------------------------------
# Auth gate
# -----------------------------------------------------------------------------


class Unauthenticated(SocialBackendError):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class Forbidden(SocialBackendError):
    """Raised for an invalid or expired token, or a failed ownership check."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Store outcomes
# -----------------------------------------------------------------------------


class NotFound(SocialBackendError):
    """Raised when a post id does not match any document."""

    def __init__(self, post_id: str):
        super().__init__("Post not found", details={"post_id": post_id})
        self.post_id = post_id


class NoModification(SocialBackendError):
    """
    Raised when the store reports zero documents changed.

    Covers both "nothing matched" and "matched but nothing changed"; the
    store result does not let callers tell them apart.
    """

    def __init__(self, operation: str):
        super().__init__(f"{operation}: no document modified", details={"operation": operation})
        self.operation = operation


class InternalError(SocialBackendError):
    """Raised for unexpected store or crypto failures."""

    def __init__(self, message: str = "Internal server error", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
