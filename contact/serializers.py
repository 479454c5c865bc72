"""
Contact Submission Serializers

Validation of the public contact form and JSON shaping of stored submissions.
"""
from rest_framework import serializers
from .models import ContactSubmission


def _required(message):
    return {
        'required': message,
        'blank': message,
        'null': message,
    }


class ContactFormSerializer(serializers.Serializer):
    """
    Public contact form payload.

    Also used for dashboard edits, which accept the same five fields.
    """

    name = serializers.CharField(
        required=True,
        error_messages=_required('Name is required'),
        help_text="Name of the person contacting us"
    )

    email = serializers.EmailField(
        required=True,
        error_messages={**_required('Valid email is required'), 'invalid': 'Valid email is required'},
        help_text="Valid email address for follow-up"
    )

    phone = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default=None,
        help_text="Optional phone number"
    )

    service = serializers.CharField(
        required=True,
        error_messages=_required('Service selection is required'),
        help_text="Service the customer is interested in"
    )

    message = serializers.CharField(
        required=True,
        error_messages=_required('Message is required'),
        help_text="Message content"
    )

    def validate_phone(self, value):
        """Blank phone numbers are stored as null."""
        if value is None:
            return None
        return value.strip() or None


class ContactSubmissionSerializer(serializers.ModelSerializer):
    """
    Read-only representation of a stored submission (camelCase keys).
    """

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    userAgent = serializers.CharField(source='user_agent', read_only=True, allow_null=True)

    class Meta:
        model = ContactSubmission
        fields = [
            'id', 'name', 'email', 'phone', 'service', 'message',
            'createdAt', 'userAgent', 'ip', 'addressed'
        ]
        read_only_fields = ['id', 'name', 'email', 'phone', 'service', 'message', 'ip', 'addressed']


def validate_contact_form(payload):
    """
    Validate a contact form payload.

    Returns:
        dict with name, email, phone, service, message

    Raises:
        rest_framework.exceptions.ValidationError: listing every failing field
    """
    serializer = ContactFormSerializer(data=payload)
    serializer.is_valid(raise_exception=True)
    return dict(serializer.validated_data)
