"""
Bearer-token authentication (the *token verifier*).

Registered as the only entry in
``REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"]``.  For every request
carrying ``Authorization: Bearer <token>`` it:

1. verifies the signature and expiry with SimpleJWT's ``AccessToken``;
2. loads the account named by the ``user_id`` claim;
3. rejects missing or inactive accounts.

Each failure is raised as ``AuthenticationFailed`` with its own code
(``INVALID_TOKEN``, ``TOKEN_EXPIRED``, ``USER_NOT_FOUND``,
``INACTIVE_USER``).  A request without the header is left anonymous, so
``IsAuthenticated`` answers 401 ``NO_TOKEN``.  Nothing is cached between
requests.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import jwt
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


def _is_expired(raw_token: bytes) -> bool:
    """
    ``True`` when the token carries a valid signature but its ``exp``
    claim lies in the past.
    """
    try:
        payload = jwt.decode(
            raw_token,
            api_settings.VERIFYING_KEY or api_settings.SIGNING_KEY,
            algorithms=[api_settings.ALGORITHM],
            options={"verify_exp": False, "verify_aud": False},
        )
    except jwt.PyJWTError:
        return False
    exp = payload.get("exp")
    return exp is not None and exp <= datetime.now(tz=timezone.utc).timestamp()


class BearerTokenAuthentication(JWTAuthentication):
    www_authenticate_realm = "api"

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        raw_token = self.get_raw_token(header)
        if raw_token is None:
            return None

        validated_token = self.get_validated_token(raw_token)
        return self.get_user(validated_token), validated_token

    def get_validated_token(self, raw_token: bytes) -> AccessToken:
        try:
            return AccessToken(raw_token)
        except TokenError:
            if _is_expired(raw_token):
                raise AuthenticationFailed("Token expired", code="TOKEN_EXPIRED")
            raise AuthenticationFailed("Invalid token", code="INVALID_TOKEN")

    def get_user(self, validated_token: AccessToken):
        user_id = validated_token.get(api_settings.USER_ID_CLAIM)
        if user_id is None:
            raise AuthenticationFailed("Invalid token", code="INVALID_TOKEN")

        try:
            user = self.user_model.objects.get(**{api_settings.USER_ID_FIELD: user_id})
        except (self.user_model.DoesNotExist, ValueError):
            raise AuthenticationFailed("User not found", code="USER_NOT_FOUND")

        if not user.is_account_active:
            logger.info("Rejected token for inactive account %s", user.username)
            raise AuthenticationFailed("User account is inactive", code="INACTIVE_USER")

        return user
