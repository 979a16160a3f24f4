"""Session manager.

A signed-in session carries a small projection of the user under
``SESSION_USER_KEY``. Requests are authorized from that projection alone,
without reloading the account, so a level change takes effect at the
user's next login.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from django.contrib.auth import login as django_login  # type: ignore
from django.contrib.auth import logout as django_logout  # type: ignore
from django.db import DatabaseError  # type: ignore

from apps.core.exceptions import InvalidCredentials, MissingFields, SessionDestroyError, Unauthenticated

from .credentials import validate_credentials
from .models import CustomUser

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "intranet_user"


@dataclass(frozen=True)
class SessionUser:
    """Signed-in caller as recorded in the session."""

    id: str
    first_name: str
    last_name: str
    email: str
    department: str
    user_level: int

    is_authenticated = True
    is_anonymous = False

    @property
    def pk(self) -> str:
        return self.id

    @classmethod
    def from_user(cls, user: CustomUser) -> "SessionUser":
        return cls(
            id=str(user.pk),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            department=user.department,
            user_level=int(user.user_level),
        )

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _http_request(request: Any) -> Any:
    """Django ``HttpRequest`` behind a DRF ``Request``."""
    return getattr(request, "_request", request)


def read_projection(request: Any) -> SessionUser | None:
    data = _http_request(request).session.get(SESSION_USER_KEY)
    if not data:
        return None
    try:
        return SessionUser(**data)
    except TypeError:
        logger.warning("Discarding malformed session projection")
        return None


def start_session(request: Any, user: CustomUser) -> SessionUser:
    """Sign ``user`` in on this request and store the projection.

    ``django.contrib.auth.login`` cycles the session key, so an id issued
    before authentication is never reused afterwards.
    """
    http_request = _http_request(request)
    django_login(http_request, user)
    projection = SessionUser.from_user(user)
    http_request.session[SESSION_USER_KEY] = projection.as_dict()
    return projection


def login(request: Any, email: str | None, password: str | None) -> SessionUser:
    missing = [name for name, value in (("email", email), ("password", password)) if not value]
    if missing:
        raise MissingFields(missing)

    user = validate_credentials(email, password)
    if user is None:
        logger.info("Login failed for %s", email)
        raise InvalidCredentials()

    projection = start_session(request, user)
    logger.info("User %s logged in", projection.id)
    return projection


def logout(request: Any) -> None:
    http_request = _http_request(request)
    user_id = getattr(getattr(request, "user", None), "id", None)
    try:
        django_logout(http_request)
    except DatabaseError as exc:
        logger.error("Failed to destroy session for user %s", user_id, exc_info=exc)
        raise SessionDestroyError() from exc
    logger.info("User %s logged out", user_id)


def current_user(request: Any) -> SessionUser:
    projection = read_projection(request)
    if projection is None:
        raise Unauthenticated()
    return projection
