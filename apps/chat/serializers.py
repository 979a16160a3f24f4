"""Serializers for chat rooms and messages."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import ChatMessage, ChatRoom, ChatRoomMember


class ChatRoomSerializer(serializers.ModelSerializer):
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = ChatRoom
        fields = [
            "id",
            "name",
            "description",
            "type",
            "is_private",
            "created_by",
            "created_at",
            "last_message_at",
            "last_message_preview",
            "member_count",
        ]
        read_only_fields = [
            "id",
            "created_by",
            "created_at",
            "last_message_at",
            "last_message_preview",
        ]

    def get_member_count(self, obj: ChatRoom) -> int:
        return obj.members.count()


class ChatRoomMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = ChatRoomMember
        fields = ["id", "room", "user", "role", "joined_at"]
        read_only_fields = fields


class ChatMessageSerializer(serializers.ModelSerializer):
    sender_name = serializers.SerializerMethodField()

    class Meta:
        model = ChatMessage
        fields = ["id", "room", "sender", "sender_name", "message", "message_type", "created_at"]
        read_only_fields = ["id", "room", "sender", "created_at"]

    def get_sender_name(self, obj: ChatMessage) -> str | None:
        if obj.sender is None:
            return None
        return obj.sender.get_full_name()
