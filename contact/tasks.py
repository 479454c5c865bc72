"""
Contact Email Tasks

Celery tasks for sending contact-related emails.
"""
import logging

from celery import shared_task

from core.apps import get_storage
from .notifications import ContactNotificationService

logger = logging.getLogger(__name__)


@shared_task
def send_contact_notification(submission_id):
    """
    Email staff about a stored contact submission.

    Args:
        submission_id: UUID (string) of the ContactSubmission

    Returns:
        bool: whether the email was accepted by the provider
    """
    submission = get_storage().get_contact_submission_by_id(submission_id)
    if submission is None:
        logger.warning(f"Contact submission {submission_id} not found; notification skipped")
        return False

    form_data = {
        'name': submission.name,
        'email': submission.email,
        'phone': submission.phone,
        'service': submission.service,
        'message': submission.message,
    }
    return ContactNotificationService().send_contact_email(form_data)
