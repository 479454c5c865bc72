"""
Dashboard URL Configuration
"""

from django.urls import path
from .views import (
    # Submissions
    SubmissionListView,
    SubmissionDetailView,
    SubmissionAddressedView,
    SubmissionBulkDeleteView,
    SubmissionBulkAddressedView,

    # Clicks
    ClickListView,

    # Overview
    DashboardStatsView,
)

app_name = 'dashboards'

urlpatterns = [
    # Submission Endpoints (bulk routes before the id routes)
    path('submissions', SubmissionListView.as_view(), name='submission-list'),
    path('submissions/bulk-delete', SubmissionBulkDeleteView.as_view(), name='submission-bulk-delete'),
    path('submissions/bulk-addressed', SubmissionBulkAddressedView.as_view(), name='submission-bulk-addressed'),
    path('submissions/<str:submission_id>', SubmissionDetailView.as_view(), name='submission-detail'),
    path('submissions/<str:submission_id>/addressed', SubmissionAddressedView.as_view(), name='submission-addressed'),

    # Click Endpoints
    path('clicks', ClickListView.as_view(), name='click-list'),

    # Overview Endpoint
    path('stats', DashboardStatsView.as_view(), name='stats'),
]
