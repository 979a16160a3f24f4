"""DRF authentication backed by the session projection."""

from __future__ import annotations

from rest_framework.authentication import SessionAuthentication  # type: ignore

from .sessions import read_projection


class SessionProjectionAuthentication(SessionAuthentication):
    """Authenticate from the projection stored at login.

    Unlike ``SessionAuthentication`` no user row is loaded. CSRF is still
    enforced for unsafe methods. The ``WWW-Authenticate`` challenge makes
    DRF answer anonymous callers with 401 rather than 403.
    """

    def authenticate(self, request):  # type: ignore
        projection = read_projection(request)
        if projection is None:
            return None
        self.enforce_csrf(request)
        return (projection, None)

    def authenticate_header(self, request) -> str:  # type: ignore
        return 'Session realm="api"'
