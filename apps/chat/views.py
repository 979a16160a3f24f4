"""Chat API views."""

from __future__ import annotations

from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .models import ChatRoom
from .serializers import ChatMessageSerializer, ChatRoomMemberSerializer, ChatRoomSerializer


class ChatRoomViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Chat rooms of the signed-in user.

    - the list holds the rooms the caller is a member of
    - public rooms can be opened and joined by anybody signed in
    - private rooms do not exist for non-members (404)
    """

    serializer_class = ChatRoomSerializer
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        user_id = self.request.user.id
        if self.action == "list":
            return ChatRoom.objects.for_member(user_id)
        return ChatRoom.objects.visible_to(user_id)

    def perform_create(self, serializer):  # type: ignore
        serializer.instance = services.create_room(self.request.user.id, **serializer.validated_data)

    @action(detail=True, methods=["post"])
    def join(self, request, pk=None):  # type: ignore
        member, created = services.join_room(self.get_object(), request.user.id)
        return Response(
            ChatRoomMemberSerializer(member).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    @action(detail=True, methods=["get", "post"], serializer_class=ChatMessageSerializer)
    def messages(self, request, pk=None):  # type: ignore
        room = self.get_object()
        if request.method == "POST":
            serializer = ChatMessageSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            message = services.post_message(
                room,
                request.user.id,
                serializer.validated_data["message"],
                serializer.validated_data.get("message_type", "text"),
            )
            return Response(ChatMessageSerializer(message).data, status=status.HTTP_201_CREATED)

        services.require_member(room, request.user.id)
        page = self.paginate_queryset(room.messages.select_related("sender"))
        return self.get_paginated_response(ChatMessageSerializer(page, many=True).data)
