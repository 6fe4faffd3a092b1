"""
Accounts app serializers.

Contains all Request and Response serializers for the auth and user
management APIs.  Serializers handle field definitions and field-level
validation only.  **No business logic** lives here — uniqueness checks,
password hashing and role rules are in ``services.py``.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from rest_framework import serializers

from core.validators import validate_email_format, validate_password_strength

from .models import UserRole, UserStatus

User = get_user_model()


# ═══════════════════════════════════════════════════════════════════
#  Authentication Serializers
# ═══════════════════════════════════════════════════════════════════


class LoginRequestSerializer(serializers.Serializer):
    """Username + password credentials for ``POST /api/auth/login``."""

    username = serializers.CharField(max_length=191, trim_whitespace=True)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )


class LoginResponseSerializer(serializers.Serializer):
    """Shape of the ``data`` object returned by a successful login."""

    token = serializers.CharField()
    role = serializers.CharField()
    username = serializers.CharField()
    name = serializers.CharField()
    department = serializers.CharField()
    id = serializers.IntegerField()


class RegisterRequestSerializer(serializers.Serializer):
    """
    Self-registration.  ``role`` defaults to ``officer``; ``name`` to the
    username; ``department`` to ``General``.
    """

    username = serializers.CharField(max_length=150)
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
        validators=[validate_password_strength],
    )
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    name = serializers.CharField(max_length=191, required=False, allow_blank=True)
    department = serializers.CharField(max_length=191, required=False, allow_blank=True)


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True, trim_whitespace=False)
    new_password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        validators=[validate_password_strength],
    )


# ═══════════════════════════════════════════════════════════════════
#  User Serializers
# ═══════════════════════════════════════════════════════════════════


class UserSerializer(serializers.ModelSerializer):
    """Public representation of an account.  Never exposes the hash."""

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "name",
            "department",
            "status",
            "last_login",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UserFilterSerializer(serializers.Serializer):
    """
    Query-parameter filters for ``GET /api/users``.

    ``role``   : exact match
    ``status`` : exact match
    ``search`` : contains on username / email / name
    """

    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    status = serializers.ChoiceField(choices=UserStatus.choices, required=False)
    search = serializers.CharField(required=False, max_length=255)


class UserCreateSerializer(serializers.Serializer):
    """
    Admin-side account creation.  No password is accepted: the service
    generates one and returns it exactly once.
    """

    username = serializers.CharField(max_length=150)
    email = serializers.CharField(max_length=254, validators=[validate_email_format])
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    name = serializers.CharField(max_length=191, required=False, allow_blank=True)
    department = serializers.CharField(max_length=191, required=False, allow_blank=True)


class UserUpdateSerializer(serializers.Serializer):
    """
    Partial profile update.  ``role`` and ``status`` are silently ignored
    unless the acting account is an admin (enforced in the service).
    """

    email = serializers.CharField(
        max_length=254,
        required=False,
        validators=[validate_email_format],
    )
    name = serializers.CharField(max_length=191, required=False)
    department = serializers.CharField(max_length=191, required=False)
    role = serializers.ChoiceField(choices=UserRole.choices, required=False)
    status = serializers.ChoiceField(choices=UserStatus.choices, required=False)
    password = serializers.CharField(
        write_only=True,
        required=False,
        trim_whitespace=False,
        validators=[validate_password_strength],
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        # Empty strings mean "leave unchanged".
        return {key: value for key, value in attrs.items() if value not in ("", None)}
