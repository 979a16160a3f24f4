"""URL declarations for the departments app."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import AdminDepartmentViewSet, DepartmentViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"departments", DepartmentViewSet, basename="department")
router.register(r"admin/departments", AdminDepartmentViewSet, basename="admin-department")

urlpatterns = [
    path("", include(router.urls)),
]
