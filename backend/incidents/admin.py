from django.contrib import admin

from .models import Incident


@admin.register(Incident)
class IncidentAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "priority", "status", "address", "timestamp")
    list_filter = ("status", "priority")
    search_fields = ("type", "address", "description")
    raw_id_fields = ("case",)
