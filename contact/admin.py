"""
Contact Submission Django Admin Configuration
"""
from django.contrib import admin
from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    """Admin interface for contact submissions."""

    list_display = [
        'name', 'email', 'phone', 'service', 'addressed', 'created_at'
    ]

    list_filter = [
        'addressed', 'service', 'created_at'
    ]

    search_fields = [
        'name', 'email', 'phone', 'message'
    ]

    readonly_fields = [
        'id', 'ip', 'user_agent', 'created_at'
    ]

    fieldsets = (
        ('Contact Information', {
            'fields': ('name', 'email', 'phone', 'service', 'message')
        }),
        ('Status', {
            'fields': ('addressed',)
        }),
        ('Security & Tracking', {
            'fields': ('ip', 'user_agent'),
            'classes': ('collapse',)
        }),
        ('Metadata', {
            'fields': ('id', 'created_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_addressed']

    @admin.action(description='Mark selected submissions as addressed')
    def mark_addressed(self, request, queryset):
        updated = queryset.update(addressed=True)
        self.message_user(request, f"{updated} submission(s) marked as addressed.")
