"""Unit tests for access levels and the access guard."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.core.exceptions import Forbidden, Unauthenticated
from apps.users.access import require_authenticated, require_level_at_most
from apps.users.levels import UserLevel, at_least_privilege_of
from apps.users.models import User
from apps.users.permissions import IsIntranetAdmin, LevelAtMost
from apps.users.sessions import SessionUser


def _session_user(level: int) -> SessionUser:
    return SessionUser(
        id="00000000-0000-0000-0000-000000000001",
        first_name="Test",
        last_name="User",
        email="test@example.com",
        department="Engineering",
        user_level=level,
    )


@pytest.mark.parametrize(
    "level, required, expected",
    [
        (UserLevel.ADMIN, UserLevel.DEPT_HEAD, True),
        (UserLevel.DEPT_HEAD, UserLevel.DEPT_HEAD, True),
        (UserLevel.STAFF, UserLevel.DEPT_HEAD, False),
        (UserLevel.UNASSIGNED, UserLevel.VOLUNTEER, False),
    ],
)
def test_at_least_privilege_of(level, required, expected) -> None:
    assert at_least_privilege_of(level, required) is expected


def test_require_authenticated_rejects_anonymous() -> None:
    with pytest.raises(Unauthenticated):
        require_authenticated(AnonymousUser())
    with pytest.raises(Unauthenticated):
        require_authenticated(None)


def test_require_level_at_most_checks_presence_before_level() -> None:
    with pytest.raises(Unauthenticated):
        require_level_at_most(AnonymousUser(), UserLevel.DEPT_HEAD)


@pytest.mark.parametrize("level", [UserLevel.ADMIN, UserLevel.DEPT_MANAGER, UserLevel.DEPT_HEAD])
def test_require_level_at_most_admits_privileged_levels(level) -> None:
    user = _session_user(level)
    assert require_level_at_most(user, UserLevel.DEPT_HEAD) is user


@pytest.mark.parametrize("level", [UserLevel.STAFF, UserLevel.VOLUNTEER, UserLevel.UNASSIGNED])
def test_require_level_at_most_forbids_less_privileged_levels(level) -> None:
    with pytest.raises(Forbidden):
        require_level_at_most(_session_user(level), UserLevel.DEPT_HEAD)


def _request(user) -> SimpleNamespace:
    return SimpleNamespace(user=user)


def test_level_at_most_builds_permission_for_the_given_level() -> None:
    permission_class = LevelAtMost(UserLevel.STAFF)

    assert permission_class.__name__ == "LevelAtMost4"
    assert permission_class().has_permission(_request(_session_user(UserLevel.STAFF)), None)
    with pytest.raises(Forbidden):
        permission_class().has_permission(_request(_session_user(UserLevel.VOLUNTEER)), None)


@pytest.mark.parametrize(
    "level, allowed",
    [
        (UserLevel.ADMIN, True),
        (UserLevel.DEPT_MANAGER, True),
        (UserLevel.DEPT_HEAD, True),
        (UserLevel.STAFF, False),
    ],
)
def test_intranet_admin_permission_matches_admin_level(level, allowed) -> None:
    request = _request(_session_user(level))

    if allowed:
        assert IsIntranetAdmin().has_permission(request, None)
    else:
        with pytest.raises(Forbidden):
            IsIntranetAdmin().has_permission(request, None)


def test_intranet_admin_permission_rejects_anonymous() -> None:
    with pytest.raises(Unauthenticated):
        IsIntranetAdmin().has_permission(_request(AnonymousUser()), None)


@pytest.mark.parametrize(
    "level, expected",
    [
        (UserLevel.ADMIN, True),
        (UserLevel.DEPT_HEAD, True),
        (UserLevel.STAFF, False),
        (UserLevel.UNASSIGNED, False),
    ],
)
def test_user_is_intranet_admin(level, expected) -> None:
    assert User(email="x@example.com", user_level=level).is_intranet_admin() is expected
