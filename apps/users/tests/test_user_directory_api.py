"""API tests for the employee directory and profile updates."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.departments.models import Department
from apps.users.levels import UserLevel
from apps.users.tests.factories import authenticate, make_user


class UserDirectoryAPITests(APITestCase):
    def setUp(self) -> None:
        Department.objects.create(name="Engineering", icon="code", color="blue")
        Department.objects.create(name="Sales", icon="briefcase", color="green")
        self.ada = make_user("ada@example.com", department="Engineering")
        self.bob = make_user("bob@example.com", department="Sales")
        self.orphan = make_user("orphan@example.com", department="Nowhere")
        authenticate(self.client, self.ada)

    def test_list_contains_users_of_listed_departments(self) -> None:
        response = self.client.get(reverse("user-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        emails = {row["email"] for row in response.data["results"]}
        self.assertEqual(emails, {"ada@example.com", "bob@example.com"})
        self.assertNotIn("password", response.data["results"][0])

    def test_list_requires_session(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("user-list"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_retrieve_profile(self) -> None:
        response = self.client.get(reverse("user-detail", args=[self.bob.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["department"], "Sales")

    def test_retrieve_unknown_user_is_not_found(self) -> None:
        response = self.client.get(reverse("user-detail", args=["7d4b0a7e-0000-4000-8000-000000000000"]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_own_profile(self) -> None:
        response = self.client.put(
            reverse("user-detail", args=[self.ada.pk]),
            {"status": "On holiday", "department": "Sales"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.ada.refresh_from_db()
        self.assertEqual(self.ada.status, "On holiday")
        self.assertEqual(self.ada.department, "Sales")

    def test_profile_update_cannot_change_level(self) -> None:
        response = self.client.patch(
            reverse("user-detail", args=[self.ada.pk]),
            {"user_level": UserLevel.ADMIN, "first_name": "Augusta"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.ada.refresh_from_db()
        self.assertEqual(self.ada.user_level, UserLevel.STAFF)
        self.assertEqual(self.ada.first_name, "Augusta")

    def test_update_other_profile_is_forbidden(self) -> None:
        response = self.client.patch(
            reverse("user-detail", args=[self.bob.pk]),
            {"status": "hacked"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.bob.refresh_from_db()
        self.assertEqual(self.bob.status, "")
