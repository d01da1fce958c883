from django.contrib import admin
from .models import BugReport


@admin.register(BugReport)
class BugReportAdmin(admin.ModelAdmin):
    # Reports are only created through the form/API; admin is for reading them.
    list_display = ("id", "title", "severity", "created_at")
    search_fields = ("title", "description")
    list_filter = ("severity", "created_at")
    readonly_fields = ("title", "description", "severity", "created_at")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
