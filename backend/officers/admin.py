from django.contrib import admin

from .models import Officer


@admin.register(Officer)
class OfficerAdmin(admin.ModelAdmin):
    list_display = ("badge", "first_name", "last_name", "rank", "unit",
                    "status", "active_cases")
    list_filter = ("status", "unit", "department")
    search_fields = ("first_name", "last_name", "email")
    ordering = ("badge",)
