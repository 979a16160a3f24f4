"""Department directory views."""

from __future__ import annotations

import logging

from django.db import transaction  # type: ignore
from rest_framework import mixins, permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.users.models import CustomUser
from apps.users.permissions import IsIntranetAdmin
from apps.users.serializers import UserSerializer

from .models import Department
from .serializers import DepartmentSerializer

logger = logging.getLogger(__name__)


class DepartmentViewSet(viewsets.ReadOnlyModelViewSet):
    """Public directory; departments are addressed by name."""

    serializer_class = DepartmentSerializer
    permission_classes = [permissions.AllowAny]
    lookup_field = "name"
    lookup_value_regex = "[^/]+"

    def get_queryset(self):  # type: ignore
        return Department.objects.select_related("head").with_member_count()

    @action(detail=True, methods=["get"])
    def users(self, request, name=None):  # type: ignore
        """Active users whose department is ``name``.

        An unknown name yields an empty list rather than 404.
        """
        queryset = CustomUser.objects.filter(department=name, is_active=True)
        page = self.paginate_queryset(queryset)
        serializer = UserSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)


class AdminDepartmentViewSet(
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = DepartmentSerializer
    permission_classes = [IsIntranetAdmin]
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return Department.objects.select_related("head").with_member_count()

    def perform_create(self, serializer):  # type: ignore
        department = serializer.save()
        logger.info("Department %s created by %s", department.name, self.request.user.id)
        serializer.instance = self.get_queryset().get(pk=department.pk)

    def perform_update(self, serializer):  # type: ignore
        """Save the department; a rename carries its members along."""
        old_name = serializer.instance.name
        with transaction.atomic():
            department = serializer.save()
            if department.name != old_name:
                moved = CustomUser.objects.filter(department=old_name).update(department=department.name)
                logger.info("Department %s renamed to %s, %s members moved", old_name, department.name, moved)
        logger.info("Department %s updated by %s", department.name, self.request.user.id)
        serializer.instance = self.get_queryset().get(pk=department.pk)
