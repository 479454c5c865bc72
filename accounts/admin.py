from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class DashboardUserAdmin(UserAdmin):
    """Admin interface for dashboard users."""

    list_display = ['username', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username']
    ordering = ['username']
