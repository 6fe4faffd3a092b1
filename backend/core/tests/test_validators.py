"""
Unit tests for ``core.validators``.
"""

from __future__ import annotations

import pytest
from rest_framework import serializers

from core.validators import validate_email_format, validate_password_strength


class TestEmailFormat:

    @pytest.mark.parametrize("value", ["jdoe@npf.com", "taken@test.local", ""])
    def test_accepts(self, value):
        assert validate_email_format(value) == value

    @pytest.mark.parametrize("value", ["bad", "jdoe-at-npf", "a b@npf.com", "jdoe@npf"])
    def test_rejects_with_code(self, value):
        with pytest.raises(serializers.ValidationError) as exc:
            validate_email_format(value)

        assert exc.value.detail[0].code == "INVALID_EMAIL"


class TestPasswordStrength:

    def test_short_password(self):
        with pytest.raises(serializers.ValidationError) as exc:
            validate_password_strength("abc")

        assert exc.value.detail[0].code == "WEAK_PASSWORD"

    def test_long_enough(self):
        assert validate_password_strength("secret") == "secret"
