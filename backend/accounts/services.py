"""
Accounts Service Layer.

This module is the **single source of truth** for all business logic
within the ``accounts`` app.  Views must remain *thin*: they validate
input through serializers, call a service function / method, and
return the result wrapped in a DRF ``Response``.

Architecture
------------
- ``AuthenticationService``    — login, token issuance, logout.
- ``UserRegistrationService``  — self-registration flow.
- ``PasswordService``          — change-password for the current user.
- ``UserManagementService``    — admin-side user CRUD.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import ProtectedError, Q, QuerySet
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from core.constants import (
    GENERATED_PASSWORD_ALPHABET,
    GENERATED_PASSWORD_LENGTH,
    ROLE_ADMIN,
)
from core.domain.access import is_admin, require_role
from core.domain.activity import ActivityLogService
from core.domain.exceptions import (
    AuthenticationError,
    Conflict,
    DomainError,
    NotFound,
    PermissionDenied,
)

from .models import UserRole, UserStatus

User = get_user_model()
logger = logging.getLogger(__name__)


def generate_password(length: int = GENERATED_PASSWORD_LENGTH) -> str:
    """Random password drawn from an alphabet without look-alike glyphs."""
    return "".join(secrets.choice(GENERATED_PASSWORD_ALPHABET) for _ in range(length))


# ═══════════════════════════════════════════════════════════════════
#  Authentication Service
# ═══════════════════════════════════════════════════════════════════


class AuthenticationService:
    """
    Handles username/password login and JWT issuance.

    Tokens are stateless access tokens signed with the server secret;
    their ``user_id`` claim is the account primary key.  Logout is
    recorded in the activity log only, the token itself stays valid
    until it expires.
    """

    @staticmethod
    def issue_token(user: User) -> str:
        return str(AccessToken.for_user(user))

    @staticmethod
    def authenticate(username: str, password: str) -> User:
        """
        Validate credentials and return the account.

        Raises
        ------
        core.domain.exceptions.AuthenticationError
            ``INVALID_CREDENTIALS`` for an unknown username or a wrong
            password (indistinguishable on purpose), ``INACTIVE_USER``
            for a deactivated account with correct credentials.
        """
        user = User.objects.filter(username=username).first()
        if user is None or not user.check_password(password):
            raise AuthenticationError("Invalid credentials", code="INVALID_CREDENTIALS")
        if not user.is_account_active:
            raise AuthenticationError("User account is inactive", code="INACTIVE_USER")
        return user

    @classmethod
    def login(cls, username: str, password: str) -> dict[str, Any]:
        """
        Authenticate, stamp ``last_login``, record the ``login`` activity
        and return the login payload.

        Returns
        -------
        dict
            ``{"token", "role", "username", "name", "department", "id"}``.
        """
        user = cls.authenticate(username, password)

        user.last_login = timezone.now()
        user.save(update_fields=["last_login"])

        ActivityLogService.record(
            actor=user,
            action="login",
            message=f"{user.display_name} logged in",
        )
        logger.info("Login: %s", user.username)

        return {
            "token": cls.issue_token(user),
            "role": user.role,
            "username": user.username,
            "name": user.display_name,
            "department": user.department,
            "id": user.pk,
        }

    @staticmethod
    def logout(user: User) -> None:
        ActivityLogService.record(
            actor=user,
            action="logout",
            message=f"{user.display_name} logged out",
        )


# ═══════════════════════════════════════════════════════════════════
#  Registration Service
# ═══════════════════════════════════════════════════════════════════


class UserRegistrationService:
    """Self-service account creation."""

    @staticmethod
    def register_user(validated_data: dict[str, Any]) -> User:
        """
        Create a new account.

        Parameters
        ----------
        validated_data : dict
            Cleaned data from ``RegisterRequestSerializer``:
            ``username``, ``password`` and optionally ``role``, ``name``,
            ``department``.

        Raises
        ------
        core.domain.exceptions.Conflict
            ``DUPLICATE_USERNAME`` if the username is taken.
        """
        data = dict(validated_data)
        password = data.pop("password")
        username = data.pop("username")

        if User.objects.filter(username=username).exists():
            raise Conflict("Username already exists", code="DUPLICATE_USERNAME")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=username,
                    password=password,
                    role=data.get("role") or UserRole.OFFICER,
                    name=data.get("name") or username,
                    department=data.get("department") or "General",
                )
                ActivityLogService.record(
                    actor=user,
                    action="register",
                    message=f"New user registered: {user.username}",
                    metadata={"user_id": user.pk, "role": user.role},
                )
        except IntegrityError:
            raise Conflict("Username already exists", code="DUPLICATE_USERNAME")

        logger.info("User registered: %s", user.username)
        return user


# ═══════════════════════════════════════════════════════════════════
#  Password Service
# ═══════════════════════════════════════════════════════════════════


class PasswordService:

    @staticmethod
    def change_password(user: User, current_password: str, new_password: str) -> None:
        """
        Replace the account's password after re-checking the current one.

        Raises
        ------
        core.domain.exceptions.AuthenticationError
            ``INVALID_PASSWORD`` when ``current_password`` does not match.
        """
        if not user.check_password(current_password):
            raise AuthenticationError("Current password is incorrect", code="INVALID_PASSWORD")

        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])

        ActivityLogService.record(
            actor=user,
            action="change_password",
            message=f"{user.display_name} changed their password",
        )


# ═══════════════════════════════════════════════════════════════════
#  User Management Service
# ═══════════════════════════════════════════════════════════════════


class UserManagementService:
    """
    Administrative operations on accounts.

    Route-level admin gating (list / create / delete) is done by
    ``core.permissions.IsAdminRole`` in the view; the self-or-admin rule
    for updates depends on the target and therefore lives here.
    """

    @staticmethod
    def list_users(
        *,
        role: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> QuerySet[User]:
        qs = User.objects.all().order_by("-created_at")

        if role:
            qs = qs.filter(role=role)
        if status:
            qs = qs.filter(status=status)
        if search:
            qs = qs.filter(
                Q(username__icontains=search)
                | Q(email__icontains=search)
                | Q(name__icontains=search)
            )
        return qs

    @staticmethod
    def get_user(user_id: Any) -> User:
        """
        Retrieve a single account by PK.

        Raises
        ------
        core.domain.exceptions.NotFound
            ``USER_NOT_FOUND`` for an unknown or non-numeric id.
        """
        try:
            return User.objects.get(pk=int(user_id))
        except (User.DoesNotExist, TypeError, ValueError):
            raise NotFound("User not found", code="USER_NOT_FOUND")

    @staticmethod
    def create_user(validated_data: dict[str, Any], performed_by: User) -> tuple[User, str]:
        """
        Create an account with a generated password.

        Returns
        -------
        tuple[User, str]
            The new account and the plain-text password, which is shown
            to the admin exactly once and never stored.

        Raises
        ------
        core.domain.exceptions.Conflict
            ``DUPLICATE_USERNAME`` or ``DUPLICATE_EMAIL``.
        """
        require_role(performed_by, ROLE_ADMIN)
        username = validated_data["username"]
        email = validated_data["email"]

        if User.objects.filter(username=username).exists():
            raise Conflict("Username already exists", code="DUPLICATE_USERNAME")
        if User.objects.filter(email=email).exists():
            raise Conflict("Email already exists", code="DUPLICATE_EMAIL")

        password = generate_password()
        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                email=email,
                password=password,
                role=validated_data.get("role") or UserRole.OFFICER,
                name=validated_data.get("name") or username,
                department=validated_data.get("department") or "General",
                status=UserStatus.ACTIVE,
            )
            ActivityLogService.record(
                actor=performed_by,
                action="create_user",
                message=f"New user created: {user.username} ({user.role})",
                metadata={"user_id": user.pk},
            )

        logger.info("User created: %s by %s", user.username, performed_by.username)
        return user, password

    @classmethod
    def update_user(
        cls,
        user_id: Any,
        validated_data: dict[str, Any],
        performed_by: User,
    ) -> User:
        """
        Apply a partial update.

        * Only the account itself or an admin may update it.
        * ``role`` and ``status`` are applied only when the actor is an
          admin; otherwise they are ignored.
        * ``password`` is re-hashed.

        Raises
        ------
        core.domain.exceptions.NotFound
            ``USER_NOT_FOUND``.
        core.domain.exceptions.PermissionDenied
            Actor is neither the target nor an admin.
        core.domain.exceptions.Conflict
            ``DUPLICATE_EMAIL`` when the email belongs to another account.
        """
        user = cls.get_user(user_id)
        actor_is_admin = is_admin(performed_by)

        if user.pk != performed_by.pk and not actor_is_admin:
            raise PermissionDenied("Forbidden")

        data = dict(validated_data)
        if not actor_is_admin:
            data.pop("role", None)
            data.pop("status", None)

        email = data.get("email")
        if email and User.objects.filter(email=email).exclude(pk=user.pk).exists():
            raise Conflict("Email already exists", code="DUPLICATE_EMAIL")

        password = data.pop("password", None)
        for field, value in data.items():
            setattr(user, field, value)
        if password:
            user.set_password(password)

        user.save()
        logger.info("User updated: %s by %s", user.username, performed_by.username)
        return user

    @classmethod
    def delete_user(cls, user_id: Any, performed_by: User) -> None:
        """
        Hard-delete an account.

        Raises
        ------
        core.domain.exceptions.DomainError
            ``SELF_DELETE`` when the actor targets its own account.
        core.domain.exceptions.NotFound
            ``USER_NOT_FOUND``.
        """
        require_role(performed_by, ROLE_ADMIN)
        user = cls.get_user(user_id)
        if user.pk == performed_by.pk:
            raise DomainError("Cannot delete your own account", code="SELF_DELETE")

        username = user.username
        with transaction.atomic():
            try:
                user.delete()
            except ProtectedError:
                raise Conflict(
                    "User owns existing records and cannot be deleted",
                    code="USER_IN_USE",
                )
            ActivityLogService.record(
                actor=performed_by,
                action="delete_user",
                message=f"User deleted: {username}",
            )
        logger.info("User deleted: %s by %s", username, performed_by.username)
