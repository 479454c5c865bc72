"""
Shared API view helpers.
"""
from django.conf import settings
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView

from .apps import get_storage


def get_client_ip(request):
    """Get client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip or None


def get_user_agent(request):
    return request.META.get('HTTP_USER_AGENT') or None


def parse_bool(value):
    """Parse a ``true``/``false`` query parameter; anything else is None."""
    if value is None:
        return None
    lowered = str(value).strip().lower()
    if lowered in ('true', '1', 'yes'):
        return True
    if lowered in ('false', '0', 'no'):
        return False
    return None


class StorageAPIView(APIView):
    """
    Base view for endpoints backed by the storage layer.

    The storage instance can be injected with ``as_view(storage=...)``;
    otherwise the instance built at startup is used.
    """

    storage = None

    def get_storage(self):
        return self.storage if self.storage is not None else get_storage()

    def get_limit(self, request, default):
        """
        Read ``?limit=`` as a positive integer capped at DASHBOARD_MAX_LIMIT.

        Raises:
            ValidationError: if the value is not a positive integer
        """
        raw = request.query_params.get('limit')
        if raw in (None, ''):
            return default
        try:
            limit = int(raw)
        except (TypeError, ValueError):
            raise ValidationError({'limit': ['Limit must be a positive integer.']})
        if limit < 1:
            raise ValidationError({'limit': ['Limit must be a positive integer.']})
        return min(limit, getattr(settings, 'DASHBOARD_MAX_LIMIT', 500))

    def get_flag(self, request, name):
        """
        Read a ``true``/``false`` query parameter; absent means None.

        Raises:
            ValidationError: if the value is not a recognised boolean
        """
        raw = request.query_params.get(name)
        if raw in (None, ''):
            return None
        value = parse_bool(raw)
        if value is None:
            raise ValidationError({name: [f'{name} must be true or false.']})
        return value
