"""Admin registrations for chat."""

from __future__ import annotations

from django.contrib import admin

from .models import ChatMessage, ChatRoom, ChatRoomMember


class ChatRoomMemberInline(admin.TabularInline):
    model = ChatRoomMember
    extra = 0
    raw_id_fields = ("user",)


@admin.register(ChatRoom)
class ChatRoomAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "is_private", "created_by", "last_message_at", "created_at")
    list_filter = ("type", "is_private")
    search_fields = ("name", "description")
    raw_id_fields = ("created_by",)
    inlines = [ChatRoomMemberInline]


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ("room", "sender", "message_type", "created_at")
    list_filter = ("message_type",)
    search_fields = ("message", "sender__email", "room__name")
    raw_id_fields = ("room", "sender")
