"""
Accounts app models.

Defines the custom ``User`` model (the *account*) that extends Django's
``AbstractUser`` with a fixed two-value role and an explicit
active/inactive status.
"""

from django.contrib.auth.models import AbstractUser
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models

from core.constants import ROLE_ADMIN, ROLE_OFFICER


class UserRole(models.TextChoices):
    ADMIN = ROLE_ADMIN, "Admin"
    OFFICER = ROLE_OFFICER, "Officer"


class UserStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"


class UserManager(DjangoUserManager):
    """Superusers created from the CLI are admins of the records system too."""

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", UserRole.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Login account for the records system.

    * ``role`` decides what the account may do (``admin`` | ``officer``).
    * ``status`` is the switch the token verifier and login check;
      Django's ``is_active`` flag is kept in sync with it on save so the
      admin site and ``authenticate()`` agree.
    * ``name`` is the display name used in case listings and the
      activity feed; it defaults to the username.
    """

    email = models.EmailField(
        unique=True,
        null=True,
        blank=True,
        verbose_name="Email Address",
    )
    name = models.CharField(
        max_length=191,
        blank=True,
        default="",
        verbose_name="Display Name",
    )
    department = models.CharField(
        max_length=191,
        default="General",
        verbose_name="Department",
    )
    role = models.CharField(
        max_length=20,
        choices=UserRole.choices,
        default=UserRole.OFFICER,
        db_index=True,
        verbose_name="Role",
    )
    status = models.CharField(
        max_length=20,
        choices=UserStatus.choices,
        default=UserStatus.ACTIVE,
        db_index=True,
        verbose_name="Status",
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created At")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated At")

    objects = UserManager()

    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = self.username
        # Unique column: store "no email" as NULL, never as "".
        if not self.email:
            self.email = None
        self.is_active = self.status == UserStatus.ACTIVE
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "status" in update_fields:
            kwargs["update_fields"] = set(update_fields) | {"is_active"}
        super().save(*args, **kwargs)

    # ── Helper predicates for role checks ────────────────────────────

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_account_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def display_name(self) -> str:
        return self.name or self.username
