"""Chat domain models.

Employees talk in rooms. A room is either public (anyone signed in can
see and join it) or private (visible to its members only). Only members
read and post messages.
"""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class ChatRoomQuerySet(models.QuerySet):
    def for_member(self, user_id) -> "ChatRoomQuerySet":
        return self.filter(members__user_id=user_id)

    def visible_to(self, user_id) -> "ChatRoomQuerySet":
        return self.filter(Q(is_private=False) | Q(members__user_id=user_id)).distinct()


class ChatRoom(models.Model):
    class Type(models.TextChoices):
        GROUP = "group", _("Group")
        DIRECT = "direct", _("Direct")

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=20, choices=Type.choices, default=Type.GROUP)
    is_private = models.BooleanField(default=False)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_chat_rooms",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    # Last message info for quick access
    last_message_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("Time of the last message"),
    )
    last_message_preview = models.CharField(
        max_length=200,
        blank=True,
        help_text=_("Preview of the last message"),
    )

    objects = ChatRoomQuerySet.as_manager()

    class Meta:
        verbose_name = _("Chat room")
        verbose_name_plural = _("Chat rooms")
        ordering = ["-last_message_at", "-created_at", "-id"]

    def __str__(self) -> str:
        return self.name

    def has_member(self, user_id) -> bool:
        return self.members.filter(user_id=user_id).exists()


class ChatRoomMember(models.Model):
    class Role(models.TextChoices):
        ADMIN = "admin", _("Admin")
        MEMBER = "member", _("Member")

    room = models.ForeignKey(ChatRoom, on_delete=models.CASCADE, related_name="members")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_memberships",
    )
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.MEMBER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Chat room member")
        verbose_name_plural = _("Chat room members")
        ordering = ["joined_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["room", "user"], name="chat_room_member_unique"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} in {self.room_id} ({self.role})"


class ChatMessage(models.Model):
    """A single message in a room."""

    class MessageType(models.TextChoices):
        TEXT = "text", _("Text")
        FILE = "file", _("File")
        IMAGE = "image", _("Image")

    room = models.ForeignKey(ChatRoom, on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="chat_messages",
    )
    message = models.TextField()
    message_type = models.CharField(max_length=20, choices=MessageType.choices, default=MessageType.TEXT)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["room", "created_at"], name="chat_message_room_created_idx"),
        ]

    def __str__(self) -> str:
        preview = self.message[:50] + "..." if len(self.message) > 50 else self.message
        return f"Message from {self.sender_id} at {self.created_at}: {preview}"

    def save(self, *args, **kwargs):
        """Update room's last message info when a message is created."""
        is_new = self.pk is None
        super().save(*args, **kwargs)

        if is_new:
            ChatRoom.objects.filter(pk=self.room_id).update(
                last_message_at=self.created_at,
                last_message_preview=self.message[:200],
            )
