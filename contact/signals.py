"""
Contact Submission Signals

Django signals for contact-related events.
"""
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver
from .models import ContactSubmission

logger = logging.getLogger(__name__)


@receiver(post_save, sender=ContactSubmission)
def contact_submission_post_save(sender, instance, created, **kwargs):
    """Log new contact submissions."""
    if created:
        logger.info(f"New contact submission {instance.id} from {instance.email} ({instance.service})")
