"""Permission classes built on the access control guard."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .access import require_authenticated, require_level_at_most
from .levels import ADMIN_LEVEL


class IsSessionAuthenticated(permissions.BasePermission):
    """Any signed-in employee."""

    def has_permission(self, request, view) -> bool:  # type: ignore
        require_authenticated(request.user)
        return True


class _LevelAtMostPermission(permissions.BasePermission):
    max_level: int = ADMIN_LEVEL

    def has_permission(self, request, view) -> bool:  # type: ignore
        require_level_at_most(request.user, self.max_level)
        return True


def LevelAtMost(max_level: int) -> type[permissions.BasePermission]:
    """Permission class admitting levels ``max_level`` and more privileged."""
    return type(
        f"LevelAtMost{int(max_level)}",
        (_LevelAtMostPermission,),
        {"max_level": int(max_level)},
    )


class IsIntranetAdmin(LevelAtMost(ADMIN_LEVEL)):  # type: ignore[misc]
    """Content managers: department heads and above."""
