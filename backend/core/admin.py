from django.contrib import admin

from .models import ActivityLog, SequenceCounter


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ("timestamp", "action", "user", "message")
    list_filter = ("action",)
    search_fields = ("message", "action")
    readonly_fields = ("timestamp", "action", "user", "message", "metadata")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(SequenceCounter)
class SequenceCounterAdmin(admin.ModelAdmin):
    list_display = ("name", "value")
