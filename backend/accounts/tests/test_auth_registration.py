"""
Integration tests — registration, logout and password change.

Endpoints under test:
    POST /api/auth/register         (accounts:register)
    POST /api/auth/logout           (accounts:logout)
    POST /api/auth/change-password  (accounts:change-password)
"""

from __future__ import annotations

import pytest
from django.urls import reverse
from rest_framework import status

from accounts.models import User
from core.models import ActivityLog


@pytest.mark.django_db
class TestRegister:

    url = "/api/auth/register"

    def test_register_creates_officer_and_returns_token(self, api_client):
        resp = api_client.post(
            self.url,
            {"username": "newbie", "password": "secret1", "name": "New Bie"},
            format="json",
        )

        assert resp.status_code == status.HTTP_201_CREATED, resp.data
        data = resp.data["data"]
        assert data["user"]["username"] == "newbie"
        assert data["user"]["role"] == "officer"
        assert data["user"]["department"] == "General"
        assert data["token"]

        user = User.objects.get(username="newbie")
        assert user.check_password("secret1")
        assert ActivityLog.objects.filter(user=user, action="register").exists()

    def test_short_password_is_weak_password(self, api_client):
        resp = api_client.post(self.url, {"username": "weak", "password": "12345"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "WEAK_PASSWORD"

    def test_missing_username_is_missing_fields(self, api_client):
        resp = api_client.post(self.url, {"password": "secret1"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "MISSING_FIELDS"

    def test_duplicate_username_is_conflict(self, api_client, create_user):
        create_user(username="taken")

        resp = api_client.post(self.url, {"username": "taken", "password": "secret1"}, format="json")

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.data["code"] == "DUPLICATE_USERNAME"


@pytest.mark.django_db
class TestLogoutAndChangePassword:

    def test_logout_records_activity(self, officer_client):
        resp = officer_client.post(reverse("accounts:logout"))

        assert resp.status_code == status.HTTP_200_OK
        assert ActivityLog.objects.filter(user=officer_client.user, action="logout").exists()

    def test_change_password(self, officer_client):
        resp = officer_client.post(
            reverse("accounts:change-password"),
            {"current_password": "TestPass123!", "new_password": "brand-new-pass"},
            format="json",
        )

        assert resp.status_code == status.HTTP_200_OK, resp.data
        user = User.objects.get(pk=officer_client.user.pk)
        assert user.check_password("brand-new-pass")
        assert ActivityLog.objects.filter(user=user, action="change_password").exists()

    def test_wrong_current_password_is_invalid_password(self, officer_client):
        resp = officer_client.post(
            reverse("accounts:change-password"),
            {"current_password": "wrong", "new_password": "brand-new-pass"},
            format="json",
        )

        assert resp.status_code == status.HTTP_401_UNAUTHORIZED
        assert resp.data["code"] == "INVALID_PASSWORD"

    def test_short_new_password_is_weak_password(self, officer_client):
        resp = officer_client.post(
            reverse("accounts:change-password"),
            {"current_password": "TestPass123!", "new_password": "abc"},
            format="json",
        )

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "WEAK_PASSWORD"

    def test_logout_requires_token(self, api_client):
        resp = api_client.post(reverse("accounts:logout"))

        assert resp.status_code == status.HTTP_401_UNAUTHORIZED
        assert resp.data["code"] == "NO_TOKEN"
