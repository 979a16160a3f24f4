"""Notification model.

Notifications are created by domain services (critical alerts among
them) and consumed by their recipient, who can mark them read. Critical
alerts additionally require an explicit acknowledgment.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Notification(models.Model):
    """A message sent to a user about some event."""

    class Type(models.TextChoices):
        INFO = 'info', _('Info')
        WARNING = 'warning', _('Warning')
        ERROR = 'error', _('Error')
        SUCCESS = 'success', _('Success')
        CRITICAL = 'critical', _('Critical')

    class Priority(models.TextChoices):
        LOW = 'low', _('Low')
        NORMAL = 'normal', _('Normal')
        HIGH = 'high', _('High')
        CRITICAL = 'critical', _('Critical')

    user = models.ForeignKey(
        'users.CustomUser', on_delete=models.CASCADE, related_name='notifications'
    )
    title = models.CharField(max_length=255)
    message = models.TextField()
    type = models.CharField(max_length=20, choices=Type.choices, default=Type.INFO)
    priority = models.CharField(max_length=20, choices=Priority.choices, default=Priority.NORMAL)
    is_read = models.BooleanField(default=False)
    requires_acknowledgment = models.BooleanField(default=False)
    acknowledged_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notification_user_read_idx'),
        ]

    def __str__(self) -> str:
        return f"Notification to {self.user_id}: {self.title}"

    @property
    def is_acknowledged(self) -> bool:
        return self.acknowledged_at is not None
