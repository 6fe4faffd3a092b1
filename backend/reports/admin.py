from django.contrib import admin

from .models import Report


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    list_display = ("report_id", "type", "format", "case", "generated_by", "date")
    list_filter = ("format",)
    search_fields = ("report_id", "type")
    raw_id_fields = ("case", "generated_by")
    readonly_fields = ("report_id", "created_at", "updated_at")
