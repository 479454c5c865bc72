"""
Tests for click tracking.
"""
import pytest
from rest_framework import status
from rest_framework.exceptions import ValidationError

from tracking.models import ButtonClick
from tracking.serializers import validate_button_click

TRACK_URL = '/api/track-click'


class TestValidateButtonClick:

    def test_valid_payload(self):
        data = validate_button_click({
            'buttonType': 'whatsapp',
            'buttonLabel': 'Chat on WhatsApp',
            'metadata': {'url': 'https://wa.me/919876543210'},
        })

        assert data == {
            'button_type': 'whatsapp',
            'button_label': 'Chat on WhatsApp',
            'metadata': {'url': 'https://wa.me/919876543210'},
        }

    def test_metadata_optional(self):
        data = validate_button_click({'buttonType': 'call', 'buttonLabel': 'Call Now'})
        assert data['metadata'] is None

    def test_unknown_button_type_accepted(self):
        data = validate_button_click({'buttonType': 'map', 'buttonLabel': 'Directions'})
        assert data['button_type'] == 'map'

    def test_missing_fields(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_button_click({'buttonLabel': ''})

        detail = excinfo.value.detail
        assert str(detail['buttonType'][0]) == 'Button type is required'
        assert str(detail['buttonLabel'][0]) == 'Button label is required'


class TestTrackClick:
    """POST /api/track-click"""

    def test_track_click(self, api_client, memory_storage):
        response = api_client.post(
            TRACK_URL,
            {'buttonType': 'call', 'buttonLabel': 'Call Now', 'metadata': {'page': '/'}},
            format='json',
            HTTP_USER_AGENT='pytest-browser',
            REMOTE_ADDR='203.0.113.9'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}

        clicks = memory_storage.get_button_clicks()
        assert len(clicks) == 1
        assert clicks[0].button_type == ButtonClick.ButtonType.CALL
        assert clicks[0].button_label == 'Call Now'
        assert clicks[0].metadata == {'page': '/'}
        assert clicks[0].ip_address == '203.0.113.9'
        assert clicks[0].user_agent == 'pytest-browser'

    def test_invalid_click_returns_400(self, api_client, memory_storage):
        response = api_client.post(TRACK_URL, {'buttonType': 'call'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'] == 'Invalid click data.'
        assert response.data['errors'] == [
            {'field': 'buttonLabel', 'message': 'Button label is required'}
        ]
        assert memory_storage.get_button_clicks() == []

    def test_storage_failure_returns_500(self, api_client, memory_storage, monkeypatch):
        def broken(data):
            raise RuntimeError('database unavailable')

        monkeypatch.setattr(memory_storage, 'track_button_click', broken)

        response = api_client.post(
            TRACK_URL, {'buttonType': 'email', 'buttonLabel': 'Email Us'}, format='json'
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'message': 'Failed to track click.'}


class TestButtonClickCreateSerializer:

    def test_known_button_types_documented(self):
        from tracking.serializers import ButtonClickCreateSerializer

        help_text = ButtonClickCreateSerializer().fields['buttonType'].help_text

        for value in ButtonClick.ButtonType.values:
            assert value in help_text
