"""Startup checks: settings, URLconf and DRF defaults resolve together."""

from __future__ import annotations

from io import StringIO

from django.core.management import call_command
from django.urls import get_resolver
from rest_framework.settings import api_settings

from apps.core.handlers import api_exception_handler
from apps.users.authentication import SessionProjectionAuthentication
from apps.users.permissions import IsSessionAuthenticated


def test_system_check_passes() -> None:
    out, err = StringIO(), StringIO()

    call_command("check", stdout=out, stderr=err)

    assert "System check identified" in out.getvalue() + err.getvalue()


def test_urlconf_loads() -> None:
    resolver = get_resolver()

    assert resolver.url_patterns


def test_rest_framework_defaults_import() -> None:
    assert api_settings.DEFAULT_AUTHENTICATION_CLASSES == [SessionProjectionAuthentication]
    assert api_settings.DEFAULT_PERMISSION_CLASSES == [IsSessionAuthenticated]
    assert api_settings.EXCEPTION_HANDLER is api_exception_handler
