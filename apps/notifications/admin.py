"""Admin registrations for notifications."""

from __future__ import annotations

from django.contrib import admin

from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "type", "priority", "is_read", "is_acknowledged", "created_at")
    list_filter = ("type", "priority", "is_read", "requires_acknowledgment")
    search_fields = ("title", "message", "user__email")
    raw_id_fields = ("user",)
    readonly_fields = ("created_at",)
