"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .api.views import AdminUserViewSet
from .views import UserViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"users", UserViewSet, basename="user")
router.register(r"admin/users", AdminUserViewSet, basename="admin-user")

urlpatterns = [
    path("", include("apps.users.auth_urls")),
    path("", include(router.urls)),
]
