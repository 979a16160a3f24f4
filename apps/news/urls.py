"""URL declarations for the news app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import AdminNewsViewSet, NewsViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"news", NewsViewSet, basename="news")
router.register(r"admin/news", AdminNewsViewSet, basename="admin-news")

urlpatterns = [
    path("", include(router.urls)),
]
