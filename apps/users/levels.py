"""Access levels of the intranet.

A lower number means more privilege. Code compares levels only through
:func:`at_least_privilege_of`; raw ``<=`` on levels belongs here and
nowhere else.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class UserLevel(models.IntegerChoices):
    ADMIN = 1, _("Admin")
    DEPT_MANAGER = 2, _("Department manager")
    DEPT_HEAD = 3, _("Department head")
    STAFF = 4, _("Staff")
    VOLUNTEER = 5, _("Volunteer")
    UNASSIGNED = 6, _("Unassigned")


# Levels allowed to publish content, manage users and raise critical alerts.
ADMIN_LEVEL = UserLevel.DEPT_HEAD


def at_least_privilege_of(level: int, required: int) -> bool:
    """True when ``level`` is as privileged as ``required`` or more."""
    return int(level) <= int(required)
