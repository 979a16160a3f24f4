"""Serializers for events and RSVPs."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers  # type: ignore

from .models import Event, EventAttendee


class EventSerializer(serializers.ModelSerializer):
    organizer_name = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "description",
            "start_time",
            "end_time",
            "location",
            "organizer",
            "organizer_name",
            "max_attendees",
            "created_at",
        ]
        read_only_fields = ["id", "organizer", "created_at"]
        extra_kwargs = {"max_attendees": {"min_value": 1}}

    def get_organizer_name(self, obj: Event) -> str | None:
        if obj.organizer is None:
            return None
        return obj.organizer.get_full_name()

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        start = attrs.get("start_time", getattr(self.instance, "start_time", None))
        end = attrs.get("end_time", getattr(self.instance, "end_time", None))
        if start and end and end < start:
            raise serializers.ValidationError({"end_time": "End time must not be before start time."})
        return attrs


class EventAttendeeSerializer(serializers.ModelSerializer):
    user_name = serializers.CharField(source="user.get_full_name", read_only=True)

    class Meta:
        model = EventAttendee
        fields = ["id", "event", "user", "user_name", "status", "created_at"]
        read_only_fields = fields


class RSVPSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=EventAttendee.Status.choices,
        default=EventAttendee.Status.ATTENDING,
    )
