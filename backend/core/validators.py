"""
Field validators shared by serializers in several apps.

Each raises ``serializers.ValidationError`` with an upper-case code that
the envelope exception handler reports verbatim.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import EmailValidator
from rest_framework import serializers

from core.constants import MIN_PASSWORD_LENGTH

_email_validator = EmailValidator()


def validate_email_format(value: str) -> str:
    if not value:
        return value
    try:
        _email_validator(value)
    except DjangoValidationError:
        raise serializers.ValidationError("Invalid email format", code="INVALID_EMAIL")
    return value


def validate_password_strength(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise serializers.ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            code="WEAK_PASSWORD",
        )
    return value
