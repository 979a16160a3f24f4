"""OpenAPI description of the session cookie authentication."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from drf_spectacular.extensions import OpenApiAuthenticationExtension  # type: ignore


class SessionProjectionScheme(OpenApiAuthenticationExtension):
    target_class = "apps.users.authentication.SessionProjectionAuthentication"
    name = "sessionAuth"

    def get_security_definition(self, auto_schema):  # type: ignore
        return {
            "type": "apiKey",
            "in": "cookie",
            "name": settings.SESSION_COOKIE_NAME,
        }
