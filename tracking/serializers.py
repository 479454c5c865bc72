"""
Click Tracking Serializers
"""
from rest_framework import serializers
from .models import ButtonClick


class ButtonClickCreateSerializer(serializers.Serializer):
    """
    Click beacon payload from the public site.

    ``metadata`` is opaque and stored as sent.
    """

    buttonType = serializers.CharField(
        required=True,
        help_text=(
            f"Kind of element clicked: {', '.join(ButtonClick.ButtonType.values)} "
            "or any other non-empty value"
        ),
        error_messages={
            'required': 'Button type is required',
            'blank': 'Button type is required',
            'null': 'Button type is required',
        }
    )
    buttonLabel = serializers.CharField(
        required=True,
        error_messages={
            'required': 'Button label is required',
            'blank': 'Button label is required',
            'null': 'Button label is required',
        }
    )
    metadata = serializers.JSONField(required=False, allow_null=True, default=None)


class ButtonClickSerializer(serializers.ModelSerializer):
    """Read-only representation of a stored click (camelCase keys)."""

    buttonType = serializers.CharField(source='button_type', read_only=True)
    buttonLabel = serializers.CharField(source='button_label', read_only=True)
    clickedAt = serializers.DateTimeField(source='clicked_at', read_only=True)
    ipAddress = serializers.CharField(source='ip_address', read_only=True, allow_null=True)
    userAgent = serializers.CharField(source='user_agent', read_only=True, allow_null=True)

    class Meta:
        model = ButtonClick
        fields = [
            'id', 'buttonType', 'buttonLabel', 'clickedAt',
            'ipAddress', 'userAgent', 'metadata'
        ]
        read_only_fields = ['id', 'metadata']


class ButtonClickStatSerializer(serializers.Serializer):
    buttonType = serializers.CharField()
    buttonLabel = serializers.CharField()
    count = serializers.IntegerField()


def validate_button_click(payload):
    """
    Validate a click beacon payload.

    Returns:
        dict with button_type, button_label, metadata

    Raises:
        rest_framework.exceptions.ValidationError: listing every failing field
    """
    serializer = ButtonClickCreateSerializer(data=payload)
    serializer.is_valid(raise_exception=True)
    return {
        'button_type': serializer.validated_data['buttonType'],
        'button_label': serializer.validated_data['buttonLabel'],
        'metadata': serializer.validated_data.get('metadata'),
    }
