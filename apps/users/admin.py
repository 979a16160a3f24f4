"""Admin registrations for the users domain."""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .models import CustomUser


@admin.register(CustomUser)
class CustomUserAdmin(BaseUserAdmin):
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (
            _("Personal info"),
            {
                "fields": (
                    "first_name",
                    "last_name",
                    "status",
                    "profile_image_url",
                )
            },
        ),
        (
            _("Department and level"),
            {"fields": ("department", "user_level")},
        ),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "password1",
                    "password2",
                    "first_name",
                    "last_name",
                    "department",
                    "user_level",
                    "is_staff",
                    "is_superuser",
                ),
            },
        ),
    )
    list_display = (
        "email",
        "first_name",
        "last_name",
        "department",
        "user_level",
        "is_active",
        "is_staff",
    )
    list_filter = ("user_level", "department", "is_active", "is_staff")
    search_fields = ("email", "first_name", "last_name", "department")
    ordering = ("email",)
    readonly_fields = ("created_at", "updated_at", "date_joined")
