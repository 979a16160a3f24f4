"""Project-wide DRF exception handler.

Every error body carries ``detail`` and ``code``; ``MissingFields`` adds
the list of absent fields and other validation errors keep DRF's
per-field mapping under ``errors``. Anything that is not an
``APIException`` is logged with its traceback and answered with a
generic ``InternalFailure`` so no internal detail reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Any

from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from .exceptions import InternalFailure, MissingFields

logger = logging.getLogger(__name__)

MISSING_CODES = frozenset({"required", "blank", "null"})


def _missing_fields(codes: Any) -> list[str] | None:
    """Field names when every validation problem is an absent value."""
    if not isinstance(codes, dict) or not codes:
        return None
    missing = []
    for field, field_codes in codes.items():
        flat = field_codes if isinstance(field_codes, list) else [field_codes]
        if not flat or not all(isinstance(code, str) and code in MISSING_CODES for code in flat):
            return None
        missing.append(field)
    return missing


def _error_code(exc: Exception, status_code: int) -> str:
    if isinstance(exc, exceptions.APIException):
        codes = exc.get_codes()
        if isinstance(codes, str):
            return codes
    return {
        status.HTTP_401_UNAUTHORIZED: "not_authenticated",
        status.HTTP_403_FORBIDDEN: "permission_denied",
        status.HTTP_404_NOT_FOUND: "not_found",
    }.get(status_code, "error")


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """DRF ``EXCEPTION_HANDLER`` producing the taxonomy's response bodies."""
    if isinstance(exc, exceptions.ValidationError):
        missing = _missing_fields(exc.get_codes())
        if missing:
            exc = MissingFields(missing)

    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if response is None:
        logger.error("Unhandled error in %s", view_name, exc_info=exc)
        failure = InternalFailure()
        return Response(
            {"detail": str(failure.detail), "code": failure.default_code},
            status=failure.status_code,
        )

    if isinstance(exc, InternalFailure):
        logger.error("%s in %s: %s", exc.__class__.__name__, view_name, exc.detail)

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "detail": "Invalid input.",
            "code": "invalid",
            "errors": response.data,
        }
        return response

    data = response.data if isinstance(response.data, dict) else {"detail": response.data}
    data.setdefault("code", _error_code(exc, response.status_code))
    if isinstance(exc, MissingFields):
        data["fields"] = exc.fields
    response.data = data
    return response
