"""News API views."""

from __future__ import annotations

import logging

from rest_framework import mixins, permissions, viewsets  # type: ignore

from apps.users.permissions import IsIntranetAdmin

from .filters import NewsFilterSet
from .models import News
from .serializers import NewsSerializer

logger = logging.getLogger(__name__)


class NewsViewSet(viewsets.ReadOnlyModelViewSet):
    """Published articles, newest first. Readable without signing in."""

    serializer_class = NewsSerializer
    permission_classes = [permissions.AllowAny]
    filterset_class = NewsFilterSet
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return News.objects.published().select_related("author")


class AdminNewsViewSet(
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Publishing, editing and deleting articles (department heads and above)."""

    serializer_class = NewsSerializer
    permission_classes = [IsIntranetAdmin]
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return News.objects.select_related("author")

    def perform_create(self, serializer):  # type: ignore
        article = serializer.save(author_id=self.request.user.id)
        logger.info("News %s created by %s", article.pk, self.request.user.id)

    def perform_destroy(self, instance):  # type: ignore
        article_id = instance.pk
        instance.delete()
        logger.info("News %s deleted by %s", article_id, self.request.user.id)
