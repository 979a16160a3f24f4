"""URL declarations for the chat app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ChatRoomViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"chat/rooms", ChatRoomViewSet, basename="chat-room")

urlpatterns = [
    path("", include(router.urls)),
]
