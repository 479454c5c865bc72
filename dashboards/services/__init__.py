"""
Dashboard services module
"""

from .leads import LeadsDashboardService

__all__ = [
    'LeadsDashboardService',
]
