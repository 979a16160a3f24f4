"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from rest_framework import serializers  # type: ignore

from .credentials import create_user
from .models import CustomUser


class RegisterSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=150)
    last_name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True, trim_whitespace=False)
    department = serializers.CharField(max_length=100)

    def create(self, validated_data: dict[str, Any]) -> CustomUser:  # type: ignore
        return create_user(validated_data)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)
