"""
Integration tests — user administration (``/api/users``).

Covers the admin-only list / create / delete routes, the self-or-admin
update rule and the self-delete guard.
"""

from __future__ import annotations

import pytest
from rest_framework import status

from accounts.models import User
from cases.models import Case
from core.models import ActivityLog

USERS_URL = "/api/users"


def _detail(user_id) -> str:
    return f"{USERS_URL}/{user_id}"


@pytest.mark.django_db
class TestUserList:

    def test_admin_lists_users_with_filters(self, admin_client, create_user):
        create_user(username="alice", name="Alice Ade")
        create_user(username="bob", status="inactive")

        resp = admin_client.get(USERS_URL, {"status": "inactive"})

        assert resp.status_code == status.HTTP_200_OK
        usernames = [u["username"] for u in resp.data["data"]]
        assert usernames == ["bob"]

    def test_search_matches_name(self, admin_client, create_user):
        create_user(username="alice", name="Alice Ade")

        resp = admin_client.get(USERS_URL, {"search": "ade"})

        assert [u["username"] for u in resp.data["data"]] == ["alice"]

    def test_officer_cannot_list(self, officer_client):
        resp = officer_client.get(USERS_URL)

        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert resp.data["code"] == "FORBIDDEN"

    def test_serialized_user_hides_password(self, admin_client):
        resp = admin_client.get(_detail(admin_client.user.pk))

        assert resp.status_code == status.HTTP_200_OK
        assert "password" not in resp.data["data"]
        assert resp.data["data"]["role"] == "admin"


@pytest.mark.django_db
class TestUserCreate:

    def test_admin_creates_user_with_generated_password(self, admin_client):
        resp = admin_client.post(
            USERS_URL,
            {"username": "recruit", "email": "recruit@npf.com", "department": "Patrol"},
            format="json",
        )

        assert resp.status_code == status.HTTP_201_CREATED, resp.data
        password = resp.data["generated_password"]
        assert len(password) == 10

        user = User.objects.get(username="recruit")
        assert user.check_password(password)
        assert user.role == "officer"
        assert user.name == "recruit"
        assert ActivityLog.objects.filter(action="create_user").exists()

    def test_invalid_email(self, admin_client):
        resp = admin_client.post(USERS_URL, {"username": "x", "email": "not-an-email"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "INVALID_EMAIL"

    def test_missing_email(self, admin_client):
        resp = admin_client.post(USERS_URL, {"username": "x"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "MISSING_FIELDS"

    @pytest.mark.parametrize(
        "payload,code",
        [
            ({"username": "taken", "email": "fresh@npf.com"}, "DUPLICATE_USERNAME"),
            ({"username": "fresh", "email": "taken@test.local"}, "DUPLICATE_EMAIL"),
        ],
    )
    def test_duplicates(self, admin_client, create_user, payload, code):
        create_user(username="taken")

        resp = admin_client.post(USERS_URL, payload, format="json")

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.data["code"] == code

    def test_officer_cannot_create(self, officer_client):
        resp = officer_client.post(USERS_URL, {"username": "x", "email": "x@npf.com"}, format="json")

        assert resp.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestUserUpdate:

    def test_self_update_ignores_role_and_status(self, officer_client):
        user = officer_client.user

        resp = officer_client.patch(
            _detail(user.pk),
            {"name": "Johnny Doe", "role": "admin", "status": "inactive"},
            format="json",
        )

        assert resp.status_code == status.HTTP_200_OK, resp.data
        user.refresh_from_db()
        assert user.name == "Johnny Doe"
        assert user.role == "officer"
        assert user.status == "active"

    def test_admin_can_change_role_and_password(self, admin_client, create_user):
        target = create_user(username="promote")

        resp = admin_client.put(
            _detail(target.pk),
            {"role": "admin", "password": "fresh-pass"},
            format="json",
        )

        assert resp.status_code == status.HTTP_200_OK
        target.refresh_from_db()
        assert target.role == "admin"
        assert target.check_password("fresh-pass")

    def test_officer_cannot_update_someone_else(self, officer_client, create_user):
        other = create_user(username="other")

        resp = officer_client.patch(_detail(other.pk), {"name": "Hacked"}, format="json")

        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert resp.data["code"] == "FORBIDDEN"

    def test_short_password_is_weak(self, officer_client):
        resp = officer_client.patch(_detail(officer_client.user.pk), {"password": "abc"}, format="json")

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "WEAK_PASSWORD"

    def test_email_taken_by_other_account(self, officer_client, create_user):
        create_user(username="owner", email="owner@npf.com")

        resp = officer_client.patch(_detail(officer_client.user.pk), {"email": "owner@npf.com"}, format="json")

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.data["code"] == "DUPLICATE_EMAIL"

    def test_unknown_user(self, admin_client):
        resp = admin_client.patch(_detail(999999), {"name": "x"}, format="json")

        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.data["code"] == "USER_NOT_FOUND"


@pytest.mark.django_db
class TestUserDelete:

    def test_admin_deletes_user(self, admin_client, create_user):
        target = create_user(username="leaving")

        resp = admin_client.delete(_detail(target.pk))

        assert resp.status_code == status.HTTP_200_OK
        assert not User.objects.filter(pk=target.pk).exists()
        assert ActivityLog.objects.filter(action="delete_user").exists()

    def test_self_delete_is_rejected(self, admin_client):
        resp = admin_client.delete(_detail(admin_client.user.pk))

        assert resp.status_code == status.HTTP_400_BAD_REQUEST
        assert resp.data["code"] == "SELF_DELETE"
        assert User.objects.filter(pk=admin_client.user.pk).exists()

    def test_officer_cannot_delete(self, officer_client, create_user):
        target = create_user(username="target")

        resp = officer_client.delete(_detail(target.pk))

        assert resp.status_code == status.HTTP_403_FORBIDDEN
        assert resp.data["code"] == "FORBIDDEN"
        assert User.objects.filter(pk=target.pk).exists()

    def test_unknown_user(self, admin_client):
        resp = admin_client.delete(_detail("nope"))

        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.data["code"] == "USER_NOT_FOUND"

    def test_account_that_created_cases_is_in_use(self, admin_client, create_user):
        author = create_user(username="author")
        Case.objects.create(case_id="CA-0001", type="theft", location="Wuse II", created_by=author)

        resp = admin_client.delete(_detail(author.pk))

        assert resp.status_code == status.HTTP_409_CONFLICT
        assert resp.data["code"] == "USER_IN_USE"
