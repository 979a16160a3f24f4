"""Admin registrations for events."""

from __future__ import annotations

from django.contrib import admin

from .models import Event, EventAttendee


class EventAttendeeInline(admin.TabularInline):
    model = EventAttendee
    extra = 0
    raw_id_fields = ("user",)
    readonly_fields = ("created_at",)


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "start_time", "end_time", "location", "organizer", "max_attendees")
    list_filter = ("start_time",)
    search_fields = ("title", "description", "location")
    raw_id_fields = ("organizer",)
    inlines = [EventAttendeeInline]


@admin.register(EventAttendee)
class EventAttendeeAdmin(admin.ModelAdmin):
    list_display = ("event", "user", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("event__title", "user__email")
    raw_id_fields = ("event", "user")
