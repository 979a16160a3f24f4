"""API views for notifications and critical alerts."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, inline_serializer  # type: ignore
from rest_framework import mixins, serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.levels import ADMIN_LEVEL, at_least_privilege_of
from apps.users.permissions import IsIntranetAdmin

from . import services
from .models import Notification
from .serializers import CriticalAlertSerializer, NotificationSerializer


class NotificationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Notifications of the signed-in user.

    Other users' notifications are invisible: they answer 404 everywhere.
    """

    serializer_class = NotificationSerializer
    filterset_fields = ['type', 'is_read']
    lookup_value_regex = r'\d+'

    def get_queryset(self):  # type: ignore
        return Notification.objects.filter(user_id=self.request.user.id)

    def _paginated(self, queryset):  # type: ignore
        page = self.paginate_queryset(queryset)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=False, methods=['get'])
    def unread(self, request):  # type: ignore
        return self._paginated(self.get_queryset().filter(is_read=False))

    @action(detail=False, methods=['get'])
    def critical(self, request):  # type: ignore
        """Critical alerts awaiting acknowledgment; only admins receive them."""
        if not at_least_privilege_of(request.user.user_level, ADMIN_LEVEL):
            return self._paginated(Notification.objects.none())
        return self._paginated(services.pending_critical(request.user.id))

    @action(detail=True, methods=['put', 'post'])
    def read(self, request, pk=None):  # type: ignore
        notification = services.mark_read(self.get_object())
        return Response(self.get_serializer(notification).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'])
    def acknowledge(self, request, pk=None):  # type: ignore
        notification = services.acknowledge(self.get_object())
        return Response(self.get_serializer(notification).data, status=status.HTTP_200_OK)


class CriticalAlertView(APIView):
    """Broadcast a critical alert to everyone at or above a level."""

    permission_classes = [IsIntranetAdmin]

    @extend_schema(
        request=CriticalAlertSerializer,
        responses={
            200: inline_serializer(
                'CriticalAlertResult',
                {
                    'detail': serializers.CharField(),
                    'notifications_created': serializers.IntegerField(),
                },
            ),
        },
    )
    def post(self, request):  # type: ignore
        serializer = CriticalAlertSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        created = services.send_critical_alert(
            serializer.validated_data['title'],
            serializer.validated_data['message'],
            serializer.validated_data['target_level'],
            sent_by=request.user,
        )
        return Response(
            {
                'detail': f"Critical alert sent to {created} users",
                'notifications_created': created,
            },
            status=status.HTTP_200_OK,
        )
