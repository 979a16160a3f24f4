"""Serializers for the account administration API."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers  # type: ignore

from apps.users.credentials import create_user
from apps.users.levels import UserLevel
from apps.users.models import CustomUser


class AdminUserCreateSerializer(serializers.Serializer):
    """Account created by an administrator, optionally with a level."""

    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True, trim_whitespace=False)
    department = serializers.CharField(max_length=100)
    user_level = serializers.ChoiceField(choices=UserLevel.choices, required=False)
    status = serializers.CharField(max_length=255, required=False, allow_blank=True)

    def create(self, validated_data: dict[str, Any]) -> CustomUser:  # type: ignore
        return create_user(validated_data, created_by=self.context["request"].user)


class UserLevelSerializer(serializers.Serializer):
    user_level = serializers.ChoiceField(choices=UserLevel.choices)
