"""User domain model for the intranet.

Employees sign in with their email address. Authorization rests on a
single attribute, ``user_level`` (see :mod:`apps.users.levels`), and the
``department`` string ties a user to an entry of the department
directory by name.
"""

from __future__ import annotations

import uuid
from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .levels import ADMIN_LEVEL, UserLevel, at_least_privilege_of


class CustomUserManager(BaseUserManager):
    """User manager that uses the email address as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("An email address is required to create a user.")
        email = self.normalize_email(email).lower()

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        extra_fields.setdefault("user_level", UserLevel.UNASSIGNED)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("user_level", UserLevel.ADMIN)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, username: str):
        return self.get(email__iexact=username)


class CustomUser(AbstractUser):
    """Intranet employee."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    email = models.EmailField(_("Email"), unique=True)
    first_name = models.CharField(_("First name"), max_length=150)
    last_name = models.CharField(_("Last name"), max_length=150)
    department = models.CharField(
        _("Department"),
        max_length=100,
        blank=True,
        db_index=True,
        help_text=_("Name of the department the user belongs to."),
    )
    user_level = models.PositiveSmallIntegerField(
        _("Access level"),
        choices=UserLevel.choices,
        default=UserLevel.UNASSIGNED,
        db_index=True,
    )
    status = models.CharField(_("Status"), max_length=255, blank=True)
    profile_image_url = models.URLField(_("Profile image URL"), max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name", "last_name"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["last_name", "first_name"]

    def __str__(self) -> str:
        return f"{self.get_full_name()} <{self.email}>"

    def is_intranet_admin(self) -> bool:
        return at_least_privilege_of(self.user_level, ADMIN_LEVEL)


User = CustomUser
