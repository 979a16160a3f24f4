"""URL declarations for the events app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import AdminEventViewSet, EventViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"events", EventViewSet, basename="event")
router.register(r"admin/events", AdminEventViewSet, basename="admin-event")

urlpatterns = [
    path("", include(router.urls)),
]
