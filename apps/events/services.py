"""RSVP handling for events."""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings  # type: ignore
from django.core.exceptions import ImproperlyConfigured  # type: ignore
from django.db import transaction  # type: ignore

from .models import Event, EventAttendee

logger = logging.getLogger(__name__)

RSVP_HISTORY = "history"
RSVP_LATEST = "latest"
RSVP_POLICIES = (RSVP_HISTORY, RSVP_LATEST)


def rsvp_policy() -> str:
    policy = getattr(settings, "EVENT_RSVP_POLICY", RSVP_HISTORY)
    if policy not in RSVP_POLICIES:
        raise ImproperlyConfigured(
            f"EVENT_RSVP_POLICY must be one of {', '.join(RSVP_POLICIES)}, got {policy!r}"
        )
    return policy


def rsvp_to_event(event: Event, user_id: Any, status: str) -> EventAttendee:
    """Record ``user_id``'s answer for ``event``.

    ``history`` appends a row per answer; ``latest`` keeps a single row
    per (event, user) holding the most recent answer. Under ``latest`` the
    event row is locked first so concurrent first answers of one user
    cannot both insert.
    """
    if rsvp_policy() == RSVP_HISTORY:
        attendee = EventAttendee.objects.create(event=event, user_id=user_id, status=status)
    else:
        with transaction.atomic():
            Event.objects.select_for_update().filter(pk=event.pk).first()
            rows = list(
                EventAttendee.objects.select_for_update()
                .filter(event=event, user_id=user_id)
                .order_by("-created_at", "-id")
            )
            if rows:
                attendee = rows[0]
                attendee.status = status
                attendee.save(update_fields=["status"])
                EventAttendee.objects.filter(pk__in=[row.pk for row in rows[1:]]).delete()
            else:
                attendee = EventAttendee.objects.create(event=event, user_id=user_id, status=status)

    logger.info("User %s answered %s for event %s", user_id, status, event.pk)
    return attendee
