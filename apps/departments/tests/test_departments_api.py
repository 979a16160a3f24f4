"""API tests for the department directory."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.departments.models import Department
from apps.notifications.services import send_critical_alert
from apps.users.levels import UserLevel
from apps.users.models import User
from apps.users.tests.factories import authenticate, make_user


class DepartmentAPITests(APITestCase):
    def setUp(self) -> None:
        self.engineering = Department.objects.create(
            name="Engineering",
            description="Builds things",
            icon="code",
            color="blue",
        )
        Department.objects.create(name="Human Resources", icon="users", color="pink")
        make_user("ada@example.com", department="Engineering")
        make_user("linus@example.com", department="Engineering")
        make_user("gone@example.com", department="Engineering", is_active=False)
        make_user("hr@example.com", department="Human Resources")

    def test_list_is_public_and_counts_members(self) -> None:
        response = self.client.get(reverse("department-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        counts = {row["name"]: row["member_count"] for row in response.data["results"]}
        self.assertEqual(counts, {"Engineering": 2, "Human Resources": 1})

    def test_users_by_department_name(self) -> None:
        response = self.client.get(reverse("department-users", args=["Human Resources"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([row["email"] for row in response.data["results"]], ["hr@example.com"])

    def test_users_of_unknown_department_is_empty(self) -> None:
        response = self.client.get(reverse("department-users", args=["Marketing"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["count"], 0)

    def test_admin_creates_and_updates_department(self) -> None:
        authenticate(self.client, make_user("head@example.com", level=UserLevel.DEPT_HEAD))

        created = self.client.post(
            reverse("admin-department-list"),
            {"name": "Marketing", "icon": "megaphone", "color": "orange"},
            format="json",
        )
        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)

        updated = self.client.patch(
            reverse("admin-department-detail", args=[created.data["id"]]),
            {"description": "Tells people about things"},
            format="json",
        )
        self.assertEqual(updated.status_code, status.HTTP_200_OK, updated.data)
        self.assertEqual(
            Department.objects.get(name="Marketing").description,
            "Tells people about things",
        )

    def test_staff_cannot_manage_departments(self) -> None:
        authenticate(self.client, make_user("staff@example.com", level=UserLevel.STAFF))

        response = self.client.post(
            reverse("admin-department-list"),
            {"name": "Marketing", "icon": "megaphone", "color": "orange"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Department.objects.filter(name="Marketing").exists())

    def test_anonymous_cannot_manage_departments(self) -> None:
        response = self.client.patch(
            reverse("admin-department-detail", args=[self.engineering.pk]),
            {"color": "red"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_rename_moves_members_with_department(self) -> None:
        head = make_user("head@example.com", level=UserLevel.DEPT_HEAD, department="Human Resources")
        authenticate(self.client, head)

        response = self.client.patch(
            reverse("admin-department-detail", args=[self.engineering.pk]),
            {"name": "Platform"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["name"], "Platform")
        self.assertEqual(response.data["member_count"], 2)
        self.assertFalse(User.objects.filter(department="Engineering").exists())

        members = self.client.get(reverse("department-users", args=["Platform"]))
        self.assertEqual(
            sorted(row["email"] for row in members.data["results"]),
            ["ada@example.com", "linus@example.com"],
        )

        directory = self.client.get(reverse("user-list"), {"department": "Platform"})
        self.assertEqual(directory.status_code, status.HTTP_200_OK, directory.data)
        self.assertEqual(directory.data["count"], 2)

    def test_rename_keeps_members_reachable_by_critical_alerts(self) -> None:
        make_user("lead@example.com", level=UserLevel.DEPT_HEAD, department="Engineering")
        boss = make_user("boss@example.com", level=UserLevel.ADMIN, department="Human Resources")
        authenticate(self.client, boss)
        self.assertEqual(send_critical_alert("Drill", "Fire drill", UserLevel.DEPT_HEAD), 2)

        response = self.client.patch(
            reverse("admin-department-detail", args=[self.engineering.pk]),
            {"name": "Platform"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        self.assertEqual(send_critical_alert("Drill", "Fire drill", UserLevel.DEPT_HEAD), 2)

    def test_create_reports_member_count(self) -> None:
        make_user("mia@example.com", department="Marketing")
        authenticate(self.client, make_user("head@example.com", level=UserLevel.DEPT_HEAD))

        response = self.client.post(
            reverse("admin-department-list"),
            {"name": "Marketing", "icon": "megaphone", "color": "orange"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["member_count"], 1)
