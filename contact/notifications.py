"""
Contact Notification Service

Renders the staff notification email for a contact form submission and hands
it to the configured email backend (SendGrid SMTP relay in production).
"""
import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils.html import escape

from core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


class ContactNotificationService:
    """
    Service for emailing new contact submissions to the business owner.

    Usage:
        service = ContactNotificationService()
        sent = service.send_contact_email(form_data)  # True / False, never raises
    """

    def __init__(self):
        self.to_email = getattr(settings, 'CONTACT_EMAIL_TO', None)
        self.from_email = getattr(settings, 'CONTACT_EMAIL_FROM', settings.DEFAULT_FROM_EMAIL)

    def build_subject(self, form_data):
        return f"New Contact Form Submission - {form_data['service']}"

    def build_text(self, form_data):
        phone_line = f"Phone: {form_data['phone']}\n" if form_data.get('phone') else ''
        return (
            "New Contact Form Submission\n\n"
            "Customer Details:\n"
            f"Name: {form_data['name']}\n"
            f"Email: {form_data['email']}\n"
            f"{phone_line}"
            f"Service Required: {form_data['service']}\n\n"
            "Message:\n"
            f"{form_data['message']}\n\n"
            "Please respond to this inquiry as soon as possible.\n"
        )

    def build_html(self, form_data):
        phone_row = (
            f"<p><strong>Phone:</strong> {escape(form_data['phone'])}</p>"
            if form_data.get('phone') else ''
        )
        return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #8ddf5a; border-bottom: 2px solid #8ddf5a; padding-bottom: 10px;">
    New Contact Form Submission
  </h2>
  <div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;">
    <h3 style="color: #545454; margin-top: 0;">Customer Details</h3>
    <p><strong>Name:</strong> {escape(form_data['name'])}</p>
    <p><strong>Email:</strong> {escape(form_data['email'])}</p>
    {phone_row}
    <p><strong>Service Required:</strong> {escape(form_data['service'])}</p>
  </div>
  <div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px;">
    <h3 style="color: #545454; margin-top: 0;">Message</h3>
    <p style="white-space: pre-wrap;">{escape(form_data['message'])}</p>
  </div>
  <div style="margin-top: 30px; padding: 15px; background-color: #8ddf5a; border-radius: 8px;">
    <p style="margin: 0; color: #545454; font-weight: bold;">
      Please respond to this inquiry as soon as possible.
    </p>
  </div>
</div>
"""

    def deliver(self, form_data):
        """
        Send the email.

        Raises:
            ExternalServiceError: if the provider rejects or cannot be reached
        """
        if not self.to_email:
            raise ExternalServiceError("CONTACT_EMAIL_TO is not configured")

        email = EmailMultiAlternatives(
            subject=self.build_subject(form_data),
            body=self.build_text(form_data),
            from_email=self.from_email,
            to=[self.to_email],
            reply_to=[form_data['email']]
        )
        email.attach_alternative(self.build_html(form_data), "text/html")

        try:
            email.send(fail_silently=False)
        except Exception as exc:
            raise ExternalServiceError(f"Email provider error: {exc}") from exc

    def send_contact_email(self, form_data):
        """
        Email a contact submission to staff.

        Returns:
            True if the provider accepted the message, False otherwise
        """
        try:
            self.deliver(form_data)
        except ExternalServiceError as exc:
            logger.error(f"Contact notification failed: {exc}")
            return False

        logger.info(f"Contact notification sent for {form_data['email']}")
        return True
