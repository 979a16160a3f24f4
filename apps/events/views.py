"""Event API views."""

from __future__ import annotations

import logging

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import IsIntranetAdmin, IsSessionAuthenticated

from .models import Event
from .serializers import EventAttendeeSerializer, EventSerializer, RSVPSerializer
from .services import rsvp_to_event

logger = logging.getLogger(__name__)


class EventViewSet(viewsets.ReadOnlyModelViewSet):
    """Events, soonest first.

    - reading is public
    - ``rsvp`` needs a signed-in user
    """

    serializer_class = EventSerializer
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return Event.objects.select_related("organizer")

    def get_permissions(self):  # type: ignore
        if self.action == "rsvp":
            return [IsSessionAuthenticated()]
        return [permissions.AllowAny()]

    @action(detail=False, methods=["get"])
    def upcoming(self, request):  # type: ignore
        page = self.paginate_queryset(self.get_queryset().upcoming())
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=True, methods=["get"])
    def attendees(self, request, pk=None):  # type: ignore
        event = self.get_object()
        page = self.paginate_queryset(event.attendees.select_related("user"))
        serializer = EventAttendeeSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=True, methods=["post"])
    def rsvp(self, request, pk=None):  # type: ignore
        event = self.get_object()
        serializer = RSVPSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        attendee = rsvp_to_event(event, request.user.id, serializer.validated_data["status"])
        return Response(EventAttendeeSerializer(attendee).data, status=status.HTTP_200_OK)


class AdminEventViewSet(
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = EventSerializer
    permission_classes = [IsIntranetAdmin]
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return Event.objects.select_related("organizer")

    def perform_create(self, serializer):  # type: ignore
        event = serializer.save(organizer_id=self.request.user.id)
        logger.info("Event %s created by %s", event.pk, self.request.user.id)

    def perform_destroy(self, instance):  # type: ignore
        event_id = instance.pk
        instance.delete()
        logger.info("Event %s deleted by %s", event_id, self.request.user.id)
