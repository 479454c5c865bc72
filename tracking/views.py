"""
Click Tracking Views
"""
from rest_framework import status
from rest_framework.response import Response

from core.views import StorageAPIView, get_client_ip, get_user_agent
from .serializers import validate_button_click


class TrackClickView(StorageAPIView):
    """
    POST /api/track-click

    Record a click on a call-to-action element (call, email, WhatsApp,
    website or social link). Fired as a beacon by the public site.
    """

    validation_error_message = 'Invalid click data.'
    error_message = 'Failed to track click.'

    def post(self, request):
        click_data = validate_button_click(request.data)

        self.get_storage().track_button_click({
            **click_data,
            'ip_address': get_client_ip(request),
            'user_agent': get_user_agent(request),
        })

        return Response({'success': True}, status=status.HTTP_200_OK)
