"""Admin registrations for news."""

from __future__ import annotations

from django.contrib import admin

from .models import News


@admin.register(News)
class NewsAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "author", "is_published", "created_at")
    list_filter = ("category", "is_published")
    search_fields = ("title", "summary", "content")
    raw_id_fields = ("author",)
    readonly_fields = ("created_at",)
