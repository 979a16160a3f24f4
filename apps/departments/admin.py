"""Admin registrations for the department directory."""

from __future__ import annotations

from django.contrib import admin

from .models import Department


@admin.register(Department)
class DepartmentAdmin(admin.ModelAdmin):
    list_display = ("name", "head", "icon", "color")
    search_fields = ("name", "description")
    raw_id_fields = ("head",)
