"""Serializers for the department directory."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Department


class DepartmentSerializer(serializers.ModelSerializer):
    member_count = serializers.IntegerField(read_only=True, default=0)
    head_name = serializers.SerializerMethodField()

    class Meta:
        model = Department
        fields = [
            "id",
            "name",
            "description",
            "head",
            "head_name",
            "icon",
            "color",
            "member_count",
        ]
        read_only_fields = ["id"]

    def get_head_name(self, obj: Department) -> str | None:
        if obj.head is None:
            return None
        return obj.head.get_full_name()
