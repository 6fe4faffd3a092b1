from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("username", "email", "name", "department", "role", "status", "last_login")
    search_fields = ("username", "email", "name")
    list_filter = ("role", "status", "department")
    ordering = ("-created_at",)
    filter_horizontal = ("groups", "user_permissions")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Records System", {"fields": ("name", "department", "role", "status")}),
    )
    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ("Records System", {"fields": ("email", "name", "department", "role")}),
    )
