"""Access control guard.

Both checks take whatever DRF put on ``request.user``: a
:class:`~apps.users.sessions.SessionUser` for signed-in callers, Django's
``AnonymousUser`` (or ``None``) otherwise.
"""

from __future__ import annotations

from typing import Any

from apps.core.exceptions import Forbidden, Unauthenticated

from .levels import at_least_privilege_of


def require_authenticated(user: Any):
    if user is None or not getattr(user, "is_authenticated", False):
        raise Unauthenticated()
    return user


def require_level_at_most(user: Any, max_level: int):
    """Pass users whose level is ``max_level`` or more privileged."""
    user = require_authenticated(user)
    if not at_least_privilege_of(user.user_level, max_level):
        raise Forbidden()
    return user
