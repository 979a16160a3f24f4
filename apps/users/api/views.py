"""Account administration views."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.generics import get_object_or_404  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.credentials import assign_level
from apps.users.models import CustomUser
from apps.users.permissions import IsIntranetAdmin
from apps.users.serializers import UserSerializer

from .serializers import AdminUserCreateSerializer, UserLevelSerializer


class AdminUserViewSet(viewsets.GenericViewSet):
    """Create accounts and move users between access levels."""

    permission_classes = [IsIntranetAdmin]
    queryset = CustomUser.objects.all()
    serializer_class = AdminUserCreateSerializer
    lookup_value_regex = r"[0-9a-fA-F-]+"

    def create(self, request):  # type: ignore
        serializer = AdminUserCreateSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["patch"], url_path="level", serializer_class=UserLevelSerializer)
    def level(self, request, pk=None):  # type: ignore
        user = get_object_or_404(CustomUser, pk=pk)
        serializer = UserLevelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        assign_level(user, serializer.validated_data["user_level"], assigned_by=request.user)
        return Response(UserSerializer(user).data)
