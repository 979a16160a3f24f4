"""User directory and profile views."""

from __future__ import annotations

import logging

from rest_framework import mixins, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.core.exceptions import Forbidden
from apps.departments.models import Department

from .models import CustomUser
from .serializers import ProfileUpdateSerializer, UserSerializer

logger = logging.getLogger(__name__)


class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Employee directory.

    - the list holds the users of every listed department
    - anybody signed in can read a profile
    - ``PUT``/``PATCH`` are partial and only allowed on your own profile
    """

    serializer_class = UserSerializer
    filterset_fields = ["department", "user_level"]
    lookup_value_regex = r"[0-9a-fA-F-]+"

    def get_queryset(self):  # type: ignore
        queryset = CustomUser.objects.filter(is_active=True)
        if self.action == "list":
            queryset = queryset.filter(department__in=Department.objects.values("name"))
        return queryset.order_by("department", "last_name", "first_name")

    def update(self, request, *args, **kwargs):  # type: ignore
        user = self.get_object()
        if str(user.pk) != str(request.user.id):
            raise Forbidden("You can only update your own profile")

        serializer = ProfileUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("User %s updated profile fields %s", user.pk, sorted(serializer.validated_data))
        return Response(UserSerializer(user).data)
