"""
Root conftest.py — shared fixtures for the entire test suite.

Provides:
  - ``api_client`` fixture returning a DRF ``APIClient``.
  - ``create_user`` factory fixture for creating test accounts.
  - ``auth_header`` fixture for authenticated requests (JWT).
  - ``admin_client`` / ``officer_client`` — clients already carrying a
    bearer token for an admin / officer account.
"""

from __future__ import annotations

import pytest
from rest_framework.test import APIClient


@pytest.fixture()
def api_client() -> APIClient:
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture()
def create_user(db):
    """
    Factory fixture that creates an account with sensible defaults.

    Usage::

        def test_something(create_user):
            user = create_user(username="alice")
            # or with all fields:
            user = create_user(
                username="bob",
                password="Str0ng!Pass",
                email="bob@example.com",
                role="admin",
                status="inactive",
            )
    """
    from accounts.models import User, UserRole, UserStatus

    _counter = 0

    def _factory(
        *,
        username: str | None = None,
        password: str = "TestPass123!",
        email: str | None = None,
        role: str = UserRole.OFFICER,
        status: str = UserStatus.ACTIVE,
        **kwargs,
    ) -> User:
        nonlocal _counter
        _counter += 1
        if username is None:
            username = f"testuser{_counter}"
        if email is None:
            email = f"{username}@test.local"

        return User.objects.create_user(
            username=username,
            password=password,
            email=email,
            role=role,
            status=status,
            **kwargs,
        )

    return _factory


@pytest.fixture()
def auth_header(create_user):
    """
    Returns a helper that creates an account and returns an
    ``Authorization`` header dict with a valid access token.

    Usage::

        def test_protected(auth_header, api_client):
            header = auth_header(username="alice", role="admin")
            api_client.credentials(HTTP_AUTHORIZATION=header["Authorization"])
            resp = api_client.get("/api/users")
            assert resp.status_code == 200

    The returned dict looks like::

        {"Authorization": "Bearer eyJ..."}
    """
    from rest_framework_simplejwt.tokens import AccessToken

    def _make(*, username: str | None = None, role: str = "officer", **user_kwargs) -> dict[str, str]:
        user = create_user(username=username, role=role, **user_kwargs)
        token = AccessToken.for_user(user)
        return {"Authorization": f"Bearer {token}"}

    return _make


def _client_for(user) -> APIClient:
    from rest_framework_simplejwt.tokens import AccessToken

    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {AccessToken.for_user(user)}")
    client.user = user
    return client


@pytest.fixture()
def admin_user(create_user):
    return create_user(username="admin", role="admin", name="System Admin")


@pytest.fixture()
def officer_user(create_user):
    return create_user(username="jdoe", role="officer", name="John Doe")


@pytest.fixture()
def admin_client(admin_user) -> APIClient:
    """Client authenticated as an admin account (``client.user``)."""
    return _client_for(admin_user)


@pytest.fixture()
def officer_client(officer_user) -> APIClient:
    """Client authenticated as an officer account (``client.user``)."""
    return _client_for(officer_user)
