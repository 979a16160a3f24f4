"""Event and attendance models."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class EventQuerySet(models.QuerySet):
    def upcoming(self) -> "EventQuerySet":
        return self.filter(start_time__gte=timezone.now())


class Event(models.Model):
    title = models.CharField(_("Title"), max_length=255)
    description = models.TextField(_("Description"))
    start_time = models.DateTimeField(_("Starts at"), db_index=True)
    end_time = models.DateTimeField(_("Ends at"), null=True, blank=True)
    location = models.CharField(_("Location"), max_length=255)
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="organized_events",
    )
    max_attendees = models.PositiveIntegerField(_("Maximum attendees"), null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering = ["start_time", "id"]

    def __str__(self) -> str:
        return f"{self.title} ({self.start_time:%Y-%m-%d %H:%M})"


class EventAttendee(models.Model):
    """One RSVP. Depending on the RSVP policy a user may have several rows."""

    class Status(models.TextChoices):
        ATTENDING = "attending", _("Attending")
        MAYBE = "maybe", _("Maybe")
        DECLINED = "declined", _("Declined")

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="attendees")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="event_rsvps",
    )
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ATTENDING)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Event attendee")
        verbose_name_plural = _("Event attendees")
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["event", "user"], name="event_attendee_event_user_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} -> {self.event_id}: {self.status}"
