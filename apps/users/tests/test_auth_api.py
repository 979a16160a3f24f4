"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from apps.users.levels import UserLevel
from apps.users.models import User
from apps.users.sessions import SESSION_USER_KEY
from apps.users.tests.factories import PASSWORD, make_user


class AuthAPITests(APITestCase):
    def setUp(self) -> None:
        self.user = make_user("ada@example.com", level=UserLevel.STAFF, department="Engineering")

    def test_register_starts_session_at_unassigned_level(self) -> None:
        payload = {
            "first_name": "Grace",
            "last_name": "Hopper",
            "email": "grace@example.com",
            "password": "StrongPass123",
            "department": "Engineering",
        }

        response = self.client.post(reverse("register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["email"], payload["email"])
        self.assertEqual(response.data["user_level"], UserLevel.UNASSIGNED)
        self.assertNotIn("password", response.data)
        created = User.objects.get(email="grace@example.com")
        self.assertNotEqual(created.password, payload["password"])
        self.assertTrue(created.check_password(payload["password"]))

        me = self.client.get(reverse("current-user"))
        self.assertEqual(me.status_code, status.HTTP_200_OK, me.data)
        self.assertEqual(me.data["id"], str(created.pk))

    def test_register_ignores_requested_level(self) -> None:
        payload = {
            "first_name": "Mallory",
            "last_name": "Climber",
            "email": "mallory@example.com",
            "password": "StrongPass123",
            "department": "Sales",
            "user_level": UserLevel.ADMIN,
        }

        response = self.client.post(reverse("register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(User.objects.get(email="mallory@example.com").user_level, UserLevel.UNASSIGNED)

    def test_register_duplicate_email_is_conflict(self) -> None:
        payload = {
            "first_name": "Ada",
            "last_name": "Again",
            "email": "ADA@example.com",
            "password": "StrongPass123",
            "department": "Engineering",
        }

        response = self.client.post(reverse("register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "conflict")
        self.assertEqual(User.objects.filter(email__iexact="ada@example.com").count(), 1)

    def test_register_lists_missing_fields(self) -> None:
        response = self.client.post(
            reverse("register"),
            {"email": "new@example.com", "password": "StrongPass123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "missing_fields")
        self.assertEqual(response.data["fields"], ["department", "first_name", "last_name"])

    def test_login_returns_projection(self) -> None:
        response = self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(
            set(response.data),
            {"id", "first_name", "last_name", "email", "department", "user_level"},
        )
        self.assertEqual(response.data["user_level"], UserLevel.STAFF)
        self.assertEqual(self.client.session[SESSION_USER_KEY]["id"], str(self.user.pk))

    def test_login_email_is_case_insensitive(self) -> None:
        response = self.client.post(
            reverse("login"),
            {"email": "Ada@Example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_login_wrong_password_and_unknown_email_look_the_same(self) -> None:
        wrong_password = self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": "nope"},
            format="json",
        )
        unknown_email = self.client.post(
            reverse("login"),
            {"email": "nobody@example.com", "password": "nope"},
            format="json",
        )

        self.assertEqual(wrong_password.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(unknown_email.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(wrong_password.data, unknown_email.data)
        self.assertEqual(wrong_password.data["detail"], "Invalid email or password")

    def test_login_requires_both_fields(self) -> None:
        response = self.client.post(reverse("login"), {"email": "ada@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["fields"], ["password"])

    def test_inactive_user_cannot_login(self) -> None:
        self.user.is_active = False
        self.user.save(update_fields=["is_active"])

        response = self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_rotates_session_key(self) -> None:
        session = self.client.session
        session["visited"] = True
        session.save()
        anonymous_key = session.session_key

        self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )

        self.assertNotEqual(self.client.session.session_key, anonymous_key)

    def test_logout_ends_session(self) -> None:
        self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )

        response = self.client.post(reverse("logout"))
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        me = self.client.get(reverse("current-user"))
        self.assertEqual(me.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(me.data["code"], "not_authenticated")

    def test_anonymous_current_user_is_unauthorized(self) -> None:
        for name in ("current-user", "auth-user"):
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED, name)

    def test_logout_requires_session(self) -> None:
        response = self.client.post(reverse("logout"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIn("WWW-Authenticate", response)

    def test_level_change_applies_at_next_login(self) -> None:
        self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )
        self.user.user_level = UserLevel.ADMIN
        self.user.save(update_fields=["user_level"])

        stale = self.client.get(reverse("current-user"))
        self.assertEqual(stale.data["user_level"], UserLevel.STAFF)

        self.client.post(reverse("logout"))
        self.client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )
        fresh = self.client.get(reverse("current-user"))
        self.assertEqual(fresh.data["user_level"], UserLevel.ADMIN)

    def test_csrf_enforced_for_session_writes(self) -> None:
        client = APIClient(enforce_csrf_checks=True)
        login = client.post(
            reverse("login"),
            {"email": "ada@example.com", "password": PASSWORD},
            format="json",
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK, login.data)

        response = client.post(reverse("logout"))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
