"""
Click Tracking Models
"""
import uuid
from django.db import models
from django.utils import timezone


class ButtonClick(models.Model):
    """
    One click on a call-to-action element.

    Append only: rows are never edited or deleted through the API.
    """

    class ButtonType(models.TextChoices):
        CALL = 'call', 'Call'
        EMAIL = 'email', 'Email'
        WHATSAPP = 'whatsapp', 'WhatsApp'
        WEBSITE = 'website', 'Website'
        SOCIAL = 'social', 'Social'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Free text so new element kinds need no migration; ButtonType lists the known ones
    button_type = models.TextField(
        db_index=True,
        help_text="Kind of element clicked (call, email, whatsapp, website, social, ...)"
    )
    button_label = models.TextField(
        help_text="Button text or social platform name"
    )

    clicked_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)

    ip_address = models.TextField(null=True, blank=True)
    user_agent = models.TextField(null=True, blank=True)

    metadata = models.JSONField(
        null=True,
        blank=True,
        help_text="Additional data such as the target URL"
    )

    class Meta:
        db_table = 'button_clicks'
        ordering = ['-clicked_at']
        indexes = [
            models.Index(fields=['button_type', 'button_label'], name='button_clic_button__2a9d41_idx'),
        ]

    def __str__(self):
        return f"{self.button_type}: {self.button_label}"
