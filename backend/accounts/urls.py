"""
Accounts app URL configuration.

Included in the project-level ``urls.py`` as::

    path('api/', include('accounts.urls')),

Trailing slashes are optional on every route.

Endpoint Map
------------
Authentication
    POST   /auth/login            → LoginView
    POST   /auth/register         → RegisterView
    GET    /auth/me               → MeView
    POST   /auth/logout           → LogoutView
    POST   /auth/change-password  → ChangePasswordView

User Management
    GET    /users                 → UserViewSet.list      (admin)
    POST   /users                 → UserViewSet.create    (admin)
    GET    /users/{id}            → UserViewSet.retrieve
    PATCH  /users/{id}            → UserViewSet.partial_update
    PUT    /users/{id}            → UserViewSet.update    (same as PATCH)
    DELETE /users/{id}            → UserViewSet.destroy   (admin)
"""

from django.urls import re_path
from rest_framework.routers import DefaultRouter

from .views import (
    ChangePasswordView,
    LoginView,
    LogoutView,
    MeView,
    RegisterView,
    UserViewSet,
)

app_name = "accounts"

router = DefaultRouter()
router.trailing_slash = "/?"
router.include_root_view = False
router.register(r"users", UserViewSet, basename="user")

urlpatterns = [
    # ── Authentication ───────────────────────────────────────────────
    re_path(r"^auth/login/?$", LoginView.as_view(), name="login"),
    re_path(r"^auth/register/?$", RegisterView.as_view(), name="register"),
    re_path(r"^auth/me/?$", MeView.as_view(), name="me"),
    re_path(r"^auth/logout/?$", LogoutView.as_view(), name="logout"),
    re_path(r"^auth/change-password/?$", ChangePasswordView.as_view(), name="change-password"),
]

urlpatterns += router.urls
