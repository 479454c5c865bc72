"""
Click Tracking Django Admin Configuration
"""
from django.contrib import admin
from .models import ButtonClick


@admin.register(ButtonClick)
class ButtonClickAdmin(admin.ModelAdmin):
    """Read-only admin for click events."""

    list_display = ['button_type', 'button_label', 'clicked_at', 'ip_address']
    list_filter = ['button_type', 'clicked_at']
    search_fields = ['button_label']
    readonly_fields = [
        'id', 'button_type', 'button_label', 'clicked_at',
        'ip_address', 'user_agent', 'metadata'
    ]

    def has_add_permission(self, request):
        """Clicks are only recorded by the site."""
        return False

    def has_change_permission(self, request, obj=None):
        return False
