"""Notification services: in-app delivery, acknowledgment and critical alerts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.conf import settings  # type: ignore
from django.db import DatabaseError, transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.core.exceptions import BroadcastFailed
from apps.users.levels import at_least_privilege_of

from .models import Notification

if TYPE_CHECKING:  # pragma: no cover
    from apps.users.models import CustomUser

logger = logging.getLogger(__name__)


# ============================================================================
# IN-APP NOTIFICATIONS
# ============================================================================

def create_in_app_notification(
    user: "CustomUser",
    title: str,
    message: str,
    **fields: Any,
) -> Notification:
    """
    Create one in-app notification.

    Args:
        user: recipient
        title: notification title
        message: notification body
        **fields: ``type``, ``priority``, ``requires_acknowledgment``

    Returns:
        Notification: the stored row. Database errors propagate.
    """
    notification = Notification.objects.create(
        user=user,
        title=title,
        message=message,
        **fields,
    )
    logger.info(f"In-app notification created for {user.email}: {title}")
    return notification


def mark_read(notification: Notification) -> Notification:
    """Mark as read. Does not acknowledge."""
    Notification.objects.filter(pk=notification.pk).update(is_read=True)
    notification.refresh_from_db()
    return notification


def acknowledge(notification: Notification) -> Notification:
    """Mark as read and acknowledged.

    Repeated calls keep the time of the first acknowledgment.
    """
    Notification.objects.filter(pk=notification.pk, acknowledged_at__isnull=True).update(
        acknowledged_at=timezone.now(),
    )
    Notification.objects.filter(pk=notification.pk).update(is_read=True)
    notification.refresh_from_db()
    logger.info(f"Notification {notification.pk} acknowledged by {notification.user_id}")
    return notification


def pending_critical(user_id: Any):
    """Critical notifications of ``user_id`` still waiting for acknowledgment."""
    return Notification.objects.filter(
        user_id=user_id,
        type=Notification.Type.CRITICAL,
        requires_acknowledgment=True,
        acknowledged_at__isnull=True,
    )


# ============================================================================
# CRITICAL ALERTS
# ============================================================================

def alert_recipients(target_level: int) -> list["CustomUser"]:
    """Active members of listed departments at ``target_level`` or above.

    Users whose department has no directory entry are not reached.
    """
    from apps.departments.models import Department
    from apps.users.models import CustomUser

    recipients: list[CustomUser] = []
    for department in Department.objects.order_by("name"):
        members = CustomUser.objects.filter(department=department.name, is_active=True)
        recipients.extend(
            user for user in members if at_least_privilege_of(user.user_level, target_level)
        )
    return recipients


def _critical_fields() -> dict[str, Any]:
    return {
        "type": Notification.Type.CRITICAL,
        "priority": Notification.Priority.CRITICAL,
        "requires_acknowledgment": True,
    }


def send_critical_alert(title: str, message: str, target_level: int, *, sent_by: Any = None) -> int:
    """
    Create a critical notification for every recipient of ``target_level``.

    With ``CRITICAL_ALERT_ATOMIC`` (default) all rows are inserted in one
    transaction and a failure leaves none behind. Otherwise rows are
    inserted one by one and those written before a failure remain.

    Returns:
        int: number of notifications created

    Raises:
        BroadcastFailed: any database error during the fan-out
    """
    atomic = getattr(settings, "CRITICAL_ALERT_ATOMIC", True)
    recipients = alert_recipients(target_level)
    logger.info(
        f"Critical alert '{title}' for level <= {target_level} from "
        f"{getattr(sent_by, 'id', 'system')}: {len(recipients)} recipients"
    )

    try:
        if atomic:
            with transaction.atomic():
                Notification.objects.bulk_create(
                    [
                        Notification(user=user, title=title, message=message, **_critical_fields())
                        for user in recipients
                    ]
                )
        else:
            for user in recipients:
                create_in_app_notification(user, title, message, **_critical_fields())
    except DatabaseError as e:
        logger.error(f"Failed to send critical alert '{title}': {e}", exc_info=True)
        raise BroadcastFailed() from e

    logger.info(f"Critical alert '{title}' delivered to {len(recipients)} users")
    return len(recipients)
