"""Serializers for notifications."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.levels import UserLevel

from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    """Serializer for notifications."""

    is_acknowledged = serializers.BooleanField(read_only=True)

    class Meta:
        model = Notification
        fields = [
            'id',
            'user',
            'title',
            'message',
            'type',
            'priority',
            'is_read',
            'requires_acknowledgment',
            'acknowledged_at',
            'is_acknowledged',
            'created_at',
        ]
        read_only_fields = fields


class CriticalAlertSerializer(serializers.Serializer):
    """Payload of a critical alert broadcast."""

    title = serializers.CharField(max_length=255)
    message = serializers.CharField()
    target_level = serializers.ChoiceField(choices=UserLevel.choices)
