"""
Django admin configuration for the hello_homer app.

Registers the option table so Hello Homer shows up in the admin index, with a
link from its changelist to the settings page.

Version: 1.0
"""
from django.contrib import admin
from django.urls import reverse

from .models import Option


@admin.register(Option)
class OptionAdmin(admin.ModelAdmin):
    """Read-only listing of stored options; edits go through the settings page."""
    list_display = ("name", "value", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("name", "value", "updated_at")
    change_list_template = "hello_homer/option_changelist.html"

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def changelist_view(self, request, extra_context=None):
        extra_context = extra_context or {}
        extra_context["settings_url"] = reverse("hello_homer:settings")
        return super().changelist_view(request, extra_context=extra_context)
