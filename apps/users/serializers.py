"""Serializers for user-related API endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .levels import UserLevel
from .models import CustomUser


class UserSerializer(serializers.ModelSerializer):
    """Public profile of an employee."""

    user_level_display = serializers.CharField(source="get_user_level_display", read_only=True)

    class Meta:
        model = CustomUser
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "department",
            "user_level",
            "user_level_display",
            "status",
            "profile_image_url",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Fields an employee may change on their own profile."""

    class Meta:
        model = CustomUser
        fields = [
            "first_name",
            "last_name",
            "department",
            "status",
            "profile_image_url",
        ]
        extra_kwargs = {field: {"required": False} for field in fields}


class SessionUserSerializer(serializers.Serializer):
    """Projection stored in the session and returned by the auth endpoints."""

    id = serializers.CharField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.EmailField()
    department = serializers.CharField(allow_blank=True)
    user_level = serializers.ChoiceField(choices=UserLevel.choices)
