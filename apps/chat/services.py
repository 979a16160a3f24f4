"""Room membership and messaging rules."""

from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError, transaction

from apps.core.exceptions import Forbidden

from .models import ChatMessage, ChatRoom, ChatRoomMember

logger = logging.getLogger(__name__)


def create_room(created_by_id: Any, **fields: Any) -> ChatRoom:
    """Create a room; the creator becomes its first admin member."""
    with transaction.atomic():
        room = ChatRoom.objects.create(created_by_id=created_by_id, **fields)
        ChatRoomMember.objects.create(room=room, user_id=created_by_id, role=ChatRoomMember.Role.ADMIN)
    logger.info("Chat room %s created by %s", room.pk, created_by_id)
    return room


def join_room(room: ChatRoom, user_id: Any) -> tuple[ChatRoomMember, bool]:
    """Add ``user_id`` to a public room. Joining twice is a no-op."""
    if room.is_private:
        raise Forbidden("This room is private")
    try:
        with transaction.atomic():
            member, created = ChatRoomMember.objects.get_or_create(room=room, user_id=user_id)
    except IntegrityError:
        member, created = ChatRoomMember.objects.get(room=room, user_id=user_id), False
    if created:
        logger.info("User %s joined chat room %s", user_id, room.pk)
    return member, created


def require_member(room: ChatRoom, user_id: Any) -> None:
    if not room.has_member(user_id):
        raise Forbidden("Join the room to read and post messages")


def post_message(room: ChatRoom, sender_id: Any, message: str, message_type: str) -> ChatMessage:
    require_member(room, sender_id)
    return ChatMessage.objects.create(
        room=room,
        sender_id=sender_id,
        message=message,
        message_type=message_type,
    )
