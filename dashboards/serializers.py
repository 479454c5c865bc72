"""
Dashboard Serializers
"""
from rest_framework import serializers

from contact.serializers import ContactFormSerializer


class SubmissionEditSerializer(ContactFormSerializer):
    """
    Dashboard edit of a submission.

    Same five fields and rules as the public form; other keys in the body
    (id, createdAt, addressed, ...) are ignored.
    """
    pass


class BulkIdsSerializer(serializers.Serializer):
    """Body of the bulk delete / bulk mark-addressed requests."""

    ids = serializers.ListField(
        child=serializers.CharField(),
        allow_empty=False,
        error_messages={
            'required': 'ids is required',
            'empty': 'Select at least one submission',
        }
    )
