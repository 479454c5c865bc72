"""
Contact Submission Models

Database schema for contact form submissions from the public site.
"""
import uuid
from django.db import models
from django.utils import timezone


class ContactSubmission(models.Model):
    """
    A single contact form entry from a prospective customer.

    Only the five customer-supplied fields and the ``addressed`` flag change
    after creation; ``created_at`` is assigned by the server once.
    """

    EDITABLE_FIELDS = ('name', 'email', 'phone', 'service', 'message')

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    # Contact Information
    name = models.TextField(
        help_text="Name of the person contacting us"
    )

    email = models.TextField(
        help_text="Email address for follow-up"
    )

    phone = models.TextField(
        null=True,
        blank=True,
        help_text="Optional phone number"
    )

    # Request Details
    service = models.TextField(
        help_text="Service the customer is interested in"
    )

    message = models.TextField(
        help_text="The message content"
    )

    # Timestamps
    created_at = models.DateTimeField(
        default=timezone.now,
        editable=False,
        db_index=True,
        help_text="When the submission was received"
    )

    # Security and Tracking
    user_agent = models.TextField(
        null=True,
        blank=True,
        help_text="Browser user agent of the submitter"
    )

    ip = models.TextField(
        null=True,
        blank=True,
        help_text="IP address of the submitter"
    )

    # Staff workflow
    addressed = models.BooleanField(
        default=False,
        db_index=True,
        help_text="Whether a staff member has handled this submission"
    )

    class Meta:
        db_table = 'contact_submissions'
        ordering = ['-created_at']
        verbose_name = 'Contact Submission'
        verbose_name_plural = 'Contact Submissions'
        indexes = [
            models.Index(fields=['addressed', 'created_at'], name='contact_sub_address_6c1f0e_idx'),
        ]

    def __str__(self):
        return f"{self.name} - {self.service} ({'addressed' if self.addressed else 'new'})"
