"""News article model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class NewsQuerySet(models.QuerySet):
    def published(self) -> "NewsQuerySet":
        return self.filter(is_published=True)


class News(models.Model):
    """Article published on the intranet front page."""

    title = models.CharField(_("Title"), max_length=255)
    content = models.TextField(_("Content"))
    summary = models.TextField(_("Summary"))
    category = models.CharField(_("Category"), max_length=50, db_index=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="news_articles",
    )
    image_url = models.URLField(_("Image URL"), max_length=500, blank=True)
    is_published = models.BooleanField(_("Published"), default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = NewsQuerySet.as_manager()

    class Meta:
        verbose_name = _("News article")
        verbose_name_plural = _("News")
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return self.title
