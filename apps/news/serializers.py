"""Serializers for news articles."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import News


class NewsSerializer(serializers.ModelSerializer):
    author_name = serializers.SerializerMethodField()

    class Meta:
        model = News
        fields = [
            "id",
            "title",
            "content",
            "summary",
            "category",
            "author",
            "author_name",
            "image_url",
            "is_published",
            "created_at",
        ]
        read_only_fields = ["id", "author", "created_at"]

    def get_author_name(self, obj: News) -> str | None:
        if obj.author is None:
            return None
        return obj.author.get_full_name()
