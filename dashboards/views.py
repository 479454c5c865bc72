"""
Dashboard API Views

REST endpoints consumed by the internal leads dashboard: submission
management (list, view, edit, acknowledge, delete, bulk actions), click
listings and the overview statistics polled by the dashboard.
"""
import logging

from rest_framework import status
from rest_framework.response import Response

from contact.serializers import ContactSubmissionSerializer
from core.views import StorageAPIView
from tracking.serializers import ButtonClickSerializer, ButtonClickStatSerializer
from .serializers import BulkIdsSerializer, SubmissionEditSerializer
from .services import LeadsDashboardService

logger = logging.getLogger(__name__)


DEFAULT_SUBMISSIONS_LIMIT = 50
DEFAULT_CLICKS_LIMIT = 100


class SubmissionListView(StorageAPIView):
    """
    GET /api/dashboard/submissions

    Query Parameters:
    - limit: Maximum rows (default: 50)
    - addressed: true / false to filter by status
    - search: Search in name, email, phone, service or message
    """

    error_message = 'Failed to fetch submissions.'

    def get(self, request):
        limit = self.get_limit(request, DEFAULT_SUBMISSIONS_LIMIT)
        submissions = self.get_storage().get_contact_submissions(
            limit=limit,
            addressed=self.get_flag(request, 'addressed'),
            search=request.query_params.get('search') or None,
        )
        return Response({
            'success': True,
            'data': ContactSubmissionSerializer(submissions, many=True).data,
        })


class SubmissionDetailView(StorageAPIView):
    """
    GET    /api/dashboard/submissions/:id   fetch one submission
    PUT    /api/dashboard/submissions/:id   edit name/email/phone/service/message
    DELETE /api/dashboard/submissions/:id   delete (no error if already gone)
    """

    validation_error_message = 'Please fill in all required fields correctly.'
    error_message = 'Failed to update submission.'

    def get(self, request, submission_id):
        submission = self.get_storage().get_contact_submission_by_id(submission_id)
        if submission is None:
            return Response(
                {'success': False, 'message': 'Submission not found'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response({
            'success': True,
            'data': ContactSubmissionSerializer(submission).data,
        })

    def put(self, request, submission_id):
        serializer = SubmissionEditSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        self.get_storage().edit_contact_submission(submission_id, serializer.validated_data)
        logger.info(f"Submission {submission_id} edited")
        return Response({'success': True})

    def delete(self, request, submission_id):
        self.get_storage().delete_contact_submission(submission_id)
        logger.info(f"Submission {submission_id} deleted")
        return Response({'success': True})


class SubmissionAddressedView(StorageAPIView):
    """
    POST /api/dashboard/submissions/:id/addressed

    Mark a submission as handled by staff.
    """

    error_message = 'Failed to mark submission as addressed.'

    def post(self, request, submission_id):
        self.get_storage().mark_contact_submission_addressed(submission_id)
        return Response({'success': True})


class SubmissionBulkDeleteView(StorageAPIView):
    """
    POST /api/dashboard/submissions/bulk-delete

    Body: {"ids": ["<uuid>", ...]}
    """

    validation_error_message = 'Select at least one submission.'
    error_message = 'Failed to delete submissions.'

    def post(self, request):
        serializer = BulkIdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        count = self.get_storage().delete_contact_submissions(serializer.validated_data['ids'])
        logger.info(f"Bulk delete removed {count} submission(s)")
        return Response({'success': True, 'count': count})


class SubmissionBulkAddressedView(StorageAPIView):
    """
    POST /api/dashboard/submissions/bulk-addressed

    Body: {"ids": ["<uuid>", ...]}
    """

    validation_error_message = 'Select at least one submission.'
    error_message = 'Failed to mark submissions as addressed.'

    def post(self, request):
        serializer = BulkIdsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        count = self.get_storage().mark_contact_submissions_addressed(serializer.validated_data['ids'])
        return Response({'success': True, 'count': count})


class ClickListView(StorageAPIView):
    """
    GET /api/dashboard/clicks

    Query Parameters:
    - limit: Maximum rows (default: 100)
    - buttonType: Filter by button type (call, email, whatsapp, ...)
    """

    error_message = 'Failed to fetch clicks.'

    def get(self, request):
        limit = self.get_limit(request, DEFAULT_CLICKS_LIMIT)
        clicks = self.get_storage().get_button_clicks(
            limit=limit,
            button_type=request.query_params.get('buttonType') or None,
        )
        return Response({
            'success': True,
            'data': ButtonClickSerializer(clicks, many=True).data,
        })


class DashboardStatsView(StorageAPIView):
    """
    GET /api/dashboard/stats

    Returns the overview polled by the dashboard every 30 seconds:
    - clickStats: click counts per (buttonType, buttonLabel)
    - totalSubmissions: number of stored submissions
    - totalClicks: number of recorded clicks
    - recentSubmissions: 10 newest submissions
    - recentClicks: 10 newest clicks
    """

    error_message = 'Failed to fetch dashboard stats.'

    def get(self, request):
        service = LeadsDashboardService(self.get_storage())
        stats = service.get_overview_stats()

        data = {
            'clickStats': ButtonClickStatSerializer(stats['clickStats'], many=True).data,
            'totalSubmissions': stats['totalSubmissions'],
            'totalClicks': stats['totalClicks'],
            'recentSubmissions': ContactSubmissionSerializer(stats['recentSubmissions'], many=True).data,
            'recentClicks': ButtonClickSerializer(stats['recentClicks'], many=True).data,
        }
        return Response({'success': True, 'data': data}, status=status.HTTP_200_OK)
