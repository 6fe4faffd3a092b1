"""
Accounts app views.

All views follow the **Thin View** pattern: validate input via
serializers, delegate to the service layer, and return the result
wrapped in the success envelope.  **No business logic** resides here.

View Map
--------
- ``LoginView``          — POST /api/auth/login
- ``RegisterView``       — POST /api/auth/register
- ``MeView``             — GET  /api/auth/me
- ``LogoutView``         — POST /api/auth/logout
- ``ChangePasswordView`` — POST /api/auth/change-password
- ``UserViewSet``        — /api/users  (list, retrieve, create,
                           partial update, destroy)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdminRole
from core.responses import success_response

from .serializers import (
    ChangePasswordSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
    RegisterRequestSerializer,
    UserCreateSerializer,
    UserFilterSerializer,
    UserSerializer,
    UserUpdateSerializer,
)
from .services import (
    AuthenticationService,
    PasswordService,
    UserManagementService,
    UserRegistrationService,
)


# ═══════════════════════════════════════════════════════════════════
#  Authentication Views
# ═══════════════════════════════════════════════════════════════════


class LoginView(APIView):
    """
    POST /api/auth/login

    Public endpoint.  Exchanges username + password for a signed access
    token and the account summary the dashboard keeps in local storage.
    """

    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(
        summary="Log in",
        description="Authenticate with username and password and receive a bearer token.",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=LoginResponseSerializer, description="Login successful."),
            400: OpenApiResponse(description="MISSING_FIELDS."),
            401: OpenApiResponse(description="INVALID_CREDENTIALS or INACTIVE_USER."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = AuthenticationService.login(
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
        )
        return success_response(payload, message="Login successful")


class RegisterView(APIView):
    """
    POST /api/auth/register

    Public endpoint.  Creates an account and logs it in straight away.
    """

    permission_classes = [AllowAny]
    authentication_classes: list = []

    @extend_schema(
        summary="Register",
        description=(
            "Create a new account. Role defaults to 'officer', department to "
            "'General'. Returns the account and a bearer token."
        ),
        request=RegisterRequestSerializer,
        responses={
            201: OpenApiResponse(description="Account created."),
            400: OpenApiResponse(description="MISSING_FIELDS or WEAK_PASSWORD."),
            409: OpenApiResponse(description="DUPLICATE_USERNAME."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = RegisterRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserRegistrationService.register_user(serializer.validated_data)
        return success_response(
            {
                "user": UserSerializer(user).data,
                "token": AuthenticationService.issue_token(user),
            },
            status=status.HTTP_201_CREATED,
            message="User registered successfully",
        )


class MeView(APIView):
    """GET /api/auth/me — the account behind the presented token."""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Current account",
        responses={200: OpenApiResponse(response=UserSerializer, description="Current account.")},
        tags=["Auth"],
    )
    def get(self, request: Request) -> Response:
        return success_response(UserSerializer(request.user).data)


class LogoutView(APIView):
    """
    POST /api/auth/logout

    Tokens are stateless, so this only records the ``logout`` activity;
    the client discards its token.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Log out",
        request=None,
        responses={200: OpenApiResponse(description="Logout recorded.")},
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        AuthenticationService.logout(request.user)
        return success_response(message="Logged out successfully")


class ChangePasswordView(APIView):
    """POST /api/auth/change-password"""

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Change password",
        request=ChangePasswordSerializer,
        responses={
            200: OpenApiResponse(description="Password changed."),
            400: OpenApiResponse(description="MISSING_FIELDS or WEAK_PASSWORD."),
            401: OpenApiResponse(description="INVALID_PASSWORD."),
        },
        tags=["Auth"],
    )
    def post(self, request: Request) -> Response:
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        PasswordService.change_password(
            request.user,
            current_password=serializer.validated_data["current_password"],
            new_password=serializer.validated_data["new_password"],
        )
        return success_response(message="Password changed successfully")


# ═══════════════════════════════════════════════════════════════════
#  User Management ViewSet
# ═══════════════════════════════════════════════════════════════════


class UserViewSet(viewsets.ViewSet):
    """
    /api/users

    Account management.

    Permission Strategy
    -------------------
    ``list``, ``create`` and ``destroy`` are admin-only at the route
    level (``IsAdminRole``), so a non-admin is refused before the target
    is even looked up.  ``retrieve`` is open to any authenticated
    account; ``partial_update`` applies the self-or-admin rule inside
    ``UserManagementService``.
    """

    permission_classes = [IsAuthenticated]

    def get_permissions(self):
        if self.action in ("list", "create", "destroy"):
            return [IsAuthenticated(), IsAdminRole()]
        return [IsAuthenticated()]

    @extend_schema(
        summary="List users",
        description="Admin only.",
        parameters=[
            OpenApiParameter(name="role", type=str, location=OpenApiParameter.QUERY, description="'admin' or 'officer'."),
            OpenApiParameter(name="status", type=str, location=OpenApiParameter.QUERY, description="'active' or 'inactive'."),
            OpenApiParameter(name="search", type=str, location=OpenApiParameter.QUERY, description="Contains match on username, email or name."),
        ],
        responses={200: OpenApiResponse(response=UserSerializer(many=True), description="Accounts.")},
        tags=["Users"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = UserFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        qs = UserManagementService.list_users(**filter_serializer.validated_data)
        return success_response(UserSerializer(qs, many=True).data)

    @extend_schema(
        summary="Retrieve user",
        responses={
            200: OpenApiResponse(response=UserSerializer, description="Account."),
            404: OpenApiResponse(description="USER_NOT_FOUND."),
        },
        tags=["Users"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        user = UserManagementService.get_user(pk)
        return success_response(UserSerializer(user).data)

    @extend_schema(
        summary="Create user",
        description=(
            "Admin only. A random password is generated and returned once "
            "as 'generated_password'."
        ),
        request=UserCreateSerializer,
        responses={
            201: OpenApiResponse(description="Account created."),
            400: OpenApiResponse(description="MISSING_FIELDS or INVALID_EMAIL."),
            409: OpenApiResponse(description="DUPLICATE_USERNAME or DUPLICATE_EMAIL."),
        },
        tags=["Users"],
    )
    def create(self, request: Request) -> Response:
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user, password = UserManagementService.create_user(
            serializer.validated_data, performed_by=request.user,
        )
        return success_response(
            UserSerializer(user).data,
            status=status.HTTP_201_CREATED,
            message="User created successfully",
            generated_password=password,
        )

    @extend_schema(
        summary="Update user",
        description=(
            "Self or admin. Only an admin may change 'role' or 'status'."
        ),
        request=UserUpdateSerializer,
        responses={
            200: OpenApiResponse(response=UserSerializer, description="Account updated."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="USER_NOT_FOUND."),
            409: OpenApiResponse(description="DUPLICATE_EMAIL."),
        },
        tags=["Users"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = UserManagementService.update_user(
            pk, serializer.validated_data, performed_by=request.user,
        )
        return success_response(UserSerializer(user).data, message="User updated successfully")

    def update(self, request: Request, pk: str = None) -> Response:
        return self.partial_update(request, pk)

    @extend_schema(
        summary="Delete user",
        description="Admin only. An account cannot delete itself.",
        responses={
            200: OpenApiResponse(description="Account deleted."),
            400: OpenApiResponse(description="SELF_DELETE."),
            403: OpenApiResponse(description="FORBIDDEN."),
            404: OpenApiResponse(description="USER_NOT_FOUND."),
        },
        tags=["Users"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        UserManagementService.delete_user(pk, performed_by=request.user)
        return success_response(message="User deleted successfully")
