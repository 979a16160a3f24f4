"""API error taxonomy.

Views and services raise the exceptions below and never build error
responses by hand. ``apps.core.handlers`` turns them into response
bodies carrying ``detail`` and ``code``.
"""

from __future__ import annotations

from typing import Iterable

from rest_framework import exceptions, status  # type: ignore


class MissingFields(exceptions.APIException):
    """The caller left out one or more required fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Required fields are missing."
    default_code = "missing_fields"

    def __init__(self, fields: Iterable[str], detail: str | None = None) -> None:
        self.fields = sorted(fields)
        if detail is None:
            detail = f"Missing required fields: {', '.join(self.fields)}"
        super().__init__(detail)


class InvalidCredentials(exceptions.APIException):
    """Email/password pair did not match. Never says which half was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid email or password"
    default_code = "invalid_credentials"


class Unauthenticated(exceptions.NotAuthenticated):
    default_detail = "Authentication required"


class Forbidden(exceptions.PermissionDenied):
    default_detail = "Insufficient permissions"


class NotFound(exceptions.NotFound):
    pass


class ConflictOrDuplicate(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"
    default_code = "conflict"


class InternalFailure(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
    default_code = "internal_error"


class SessionDestroyError(InternalFailure):
    default_detail = "Could not log out"
    default_code = "session_destroy_failed"


class BroadcastFailed(InternalFailure):
    default_detail = "Failed to send critical alert"
    default_code = "broadcast_failed"
