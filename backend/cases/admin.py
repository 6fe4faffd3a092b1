from django.contrib import admin

from .models import Case


@admin.register(Case)
class CaseAdmin(admin.ModelAdmin):
    list_display = ("case_id", "type", "status", "priority",
                    "officer", "location", "reported")
    list_filter = ("status", "priority")
    search_fields = ("case_id", "type", "location", "description")
    raw_id_fields = ("officer", "created_by")
    readonly_fields = ("case_id", "created_at", "updated_at")
