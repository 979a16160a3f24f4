"""Tests for the critical alert broadcaster and its endpoint."""

from __future__ import annotations

from unittest import mock

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from apps.core.exceptions import BroadcastFailed
from apps.departments.models import Department
from apps.notifications.models import Notification
from apps.notifications.services import send_critical_alert
from apps.users.levels import UserLevel
from apps.users.tests.factories import authenticate, make_user


@pytest.fixture
def staffed_departments(db):
    Department.objects.create(name="Engineering", icon="code", color="blue")
    Department.objects.create(name="Sales", icon="briefcase", color="green")
    return {
        "admin": make_user("admin@example.com", level=UserLevel.ADMIN, department="Engineering"),
        "manager": make_user("manager@example.com", level=UserLevel.DEPT_MANAGER, department="Sales"),
        "head": make_user("head@example.com", level=UserLevel.DEPT_HEAD, department="Sales"),
        "staff": make_user("staff@example.com", level=UserLevel.STAFF, department="Sales"),
        "volunteer": make_user("vol@example.com", level=UserLevel.VOLUNTEER, department="Engineering"),
        "orphan": make_user("orphan@example.com", level=UserLevel.ADMIN, department="Nowhere"),
    }


@pytest.mark.django_db
def test_alert_reaches_target_level_and_above(staffed_departments) -> None:
    created = send_critical_alert("Outage", "Email is down", UserLevel.DEPT_HEAD)

    assert created == 3
    recipients = set(Notification.objects.values_list("user__email", flat=True))
    assert recipients == {"admin@example.com", "manager@example.com", "head@example.com"}
    for notification in Notification.objects.all():
        assert notification.type == Notification.Type.CRITICAL
        assert notification.priority == Notification.Priority.CRITICAL
        assert notification.requires_acknowledgment is True
        assert notification.acknowledged_at is None


@pytest.mark.parametrize(
    "target_level, expected",
    [
        (UserLevel.ADMIN, {"admin"}),
        (UserLevel.DEPT_MANAGER, {"admin", "manager"}),
        (UserLevel.DEPT_HEAD, {"admin", "manager", "head"}),
        (UserLevel.STAFF, {"admin", "manager", "head", "staff"}),
        (UserLevel.VOLUNTEER, {"admin", "manager", "head", "staff", "volunteer"}),
    ],
)
@pytest.mark.django_db
def test_each_target_level_reaches_itself_and_more_privileged(
    staffed_departments, target_level, expected
) -> None:
    created = send_critical_alert("Outage", "Email is down", target_level)

    reached = {
        name
        for name, user in staffed_departments.items()
        if Notification.objects.filter(user=user).exists()
    }
    assert reached == expected
    assert created == len(expected)


@pytest.mark.django_db
def test_users_outside_listed_departments_are_not_reached(staffed_departments) -> None:
    send_critical_alert("Outage", "Email is down", UserLevel.UNASSIGNED)

    assert not Notification.objects.filter(user=staffed_departments["orphan"]).exists()
    assert Notification.objects.count() == 5


@pytest.mark.django_db
def test_atomic_alert_rolls_back_on_failure(staffed_departments, settings) -> None:
    settings.CRITICAL_ALERT_ATOMIC = True

    def half_insert(objs, *args, **kwargs):
        first = objs[0]
        Notification.objects.create(
            user=first.user,
            title=first.title,
            message=first.message,
            type=first.type,
        )
        raise DatabaseError("disk full")

    with mock.patch.object(Notification.objects, "bulk_create", side_effect=half_insert):
        with pytest.raises(BroadcastFailed):
            send_critical_alert("Outage", "Email is down", UserLevel.UNASSIGNED)

    assert Notification.objects.count() == 0


@pytest.mark.django_db
def test_sequential_alert_keeps_earlier_rows_on_failure(staffed_departments, settings) -> None:
    settings.CRITICAL_ALERT_ATOMIC = False
    original_create = Notification.objects.create
    calls = []

    def fail_on_second(**kwargs):
        calls.append(kwargs)
        if len(calls) > 1:
            raise DatabaseError("disk full")
        return original_create(**kwargs)

    with mock.patch.object(Notification.objects, "create", side_effect=fail_on_second):
        with pytest.raises(BroadcastFailed):
            send_critical_alert("Outage", "Email is down", UserLevel.UNASSIGNED)

    assert Notification.objects.count() == 1


@pytest.mark.django_db
def test_endpoint_broadcasts_and_reports_count(staffed_departments) -> None:
    client = APIClient()
    authenticate(client, staffed_departments["head"])

    response = client.post(
        reverse("critical-alert"),
        {"title": "Outage", "message": "Email is down", "target_level": UserLevel.STAFF},
        format="json",
    )

    assert response.status_code == status.HTTP_200_OK, response.data
    assert response.data["notifications_created"] == 4


@pytest.mark.django_db
def test_endpoint_forbidden_below_department_head(staffed_departments) -> None:
    client = APIClient()
    authenticate(client, staffed_departments["staff"])

    response = client.post(
        reverse("critical-alert"),
        {"title": "Outage", "message": "Email is down", "target_level": UserLevel.STAFF},
        format="json",
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert Notification.objects.count() == 0


@pytest.mark.django_db
def test_endpoint_validates_payload(staffed_departments) -> None:
    client = APIClient()
    authenticate(client, staffed_departments["admin"])

    missing = client.post(reverse("critical-alert"), {"title": "Outage"}, format="json")
    assert missing.status_code == status.HTTP_400_BAD_REQUEST
    assert missing.data["fields"] == ["message", "target_level"]

    out_of_range = client.post(
        reverse("critical-alert"),
        {"title": "Outage", "message": "Email is down", "target_level": 7},
        format="json",
    )
    assert out_of_range.status_code == status.HTTP_400_BAD_REQUEST
    assert out_of_range.data["code"] == "invalid"


@pytest.mark.django_db
def test_endpoint_reports_generic_failure(staffed_departments) -> None:
    client = APIClient()
    authenticate(client, staffed_departments["admin"])

    with mock.patch.object(Notification.objects, "bulk_create", side_effect=DatabaseError("boom")):
        response = client.post(
            reverse("critical-alert"),
            {"title": "Outage", "message": "Email is down", "target_level": UserLevel.ADMIN},
            format="json",
        )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.data["detail"] == "Failed to send critical alert"
    assert "notifications_created" not in response.data
