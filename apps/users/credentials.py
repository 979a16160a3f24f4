"""Credential store: password checks and account creation."""

from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError, transaction  # type: ignore

from apps.core.exceptions import ConflictOrDuplicate, Forbidden

from .access import require_level_at_most
from .levels import ADMIN_LEVEL, UserLevel, at_least_privilege_of
from .models import CustomUser

logger = logging.getLogger(__name__)


def validate_credentials(email: str, password: str) -> CustomUser | None:
    """Return the active user matching the pair, or ``None``.

    When no account exists the password is still hashed once so the
    response time does not reveal whether the email is registered.
    """
    user = CustomUser.objects.filter(email__iexact=email.strip()).first()
    if user is None:
        CustomUser().set_password(password)
        return None
    if not user.is_active or not user.check_password(password):
        return None
    return user


def ensure_can_grant(granted_by: Any, level: int) -> None:
    """Privileged callers may hand out levels up to their own, never above."""
    require_level_at_most(granted_by, ADMIN_LEVEL)
    if not at_least_privilege_of(granted_by.user_level, level):
        raise Forbidden("Cannot grant a level more privileged than your own")


def create_user(fields: dict[str, Any], *, created_by: Any = None) -> CustomUser:
    """Create an account from validated ``fields``.

    ``user_level`` is honoured only when ``created_by`` is a privileged
    caller; self-registration always lands on ``UserLevel.UNASSIGNED``.
    """
    data = dict(fields)
    email = data.pop("email").strip().lower()
    password = data.pop("password")
    level = data.pop("user_level", None)

    if level is None or created_by is None:
        level = UserLevel.UNASSIGNED
    else:
        ensure_can_grant(created_by, level)

    if CustomUser.objects.filter(email__iexact=email).exists():
        raise ConflictOrDuplicate("User already exists with this email")

    try:
        with transaction.atomic():
            user = CustomUser.objects.create_user(
                email=email,
                password=password,
                user_level=level,
                **data,
            )
    except IntegrityError as exc:
        raise ConflictOrDuplicate("User already exists with this email") from exc

    logger.info(
        "User %s created at level %s by %s",
        user.pk,
        user.user_level,
        getattr(created_by, "id", "self-registration"),
    )
    return user


def assign_level(user: CustomUser, level: int, *, assigned_by: Any) -> CustomUser:
    """Change ``user``'s level on behalf of a privileged caller.

    The caller can neither grant a level above its own nor touch an
    account that is more privileged than itself.
    """
    ensure_can_grant(assigned_by, level)
    if not at_least_privilege_of(assigned_by.user_level, user.user_level):
        raise Forbidden("Cannot change the level of a more privileged user")

    user.user_level = level
    user.save(update_fields=["user_level", "updated_at"])
    logger.info("User %s moved to level %s by %s", user.pk, level, assigned_by.id)
    return user
