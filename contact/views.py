"""
Contact Form Views

Public endpoint for contact form submissions.
"""
import logging

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response

from core.views import StorageAPIView, get_client_ip, get_user_agent
from .serializers import validate_contact_form
from .tasks import send_contact_notification

logger = logging.getLogger(__name__)


class ContactFormSubmitView(StorageAPIView):
    """
    Public endpoint for contact form submissions.

    POST /api/contact

    Validates the form, stamps the requester IP and user agent, stores the
    submission and optionally queues a staff notification email.
    """

    validation_error_message = 'Please fill in all required fields correctly.'
    error_message = 'An error occurred. Please try again.'

    def post(self, request):
        """Submit a contact form."""
        form_data = validate_contact_form(request.data)

        submission = self.get_storage().create_contact_submission({
            **form_data,
            'ip': get_client_ip(request),
            'user_agent': get_user_agent(request),
        })

        if getattr(settings, 'CONTACT_EMAIL_NOTIFICATIONS', False):
            self.queue_notification(submission)

        return Response(
            {
                'success': True,
                'message': 'Thank you! Your message has been sent successfully.',
                'submissionId': str(submission.id)
            },
            status=status.HTTP_200_OK
        )

    def queue_notification(self, submission):
        # The submission is already stored; a broker outage must not fail the request
        try:
            send_contact_notification.delay(str(submission.id))
        except Exception as exc:
            logger.error(f"Could not queue notification for submission {submission.id}: {exc}")
