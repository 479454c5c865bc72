"""
Error Types and API Error Translation

Storage and external-service exceptions shared by every app, plus the DRF
exception handler that turns them into the JSON envelope the site expects:

    {"success": false, "message": "...", "errors": [{"field": ..., "message": ...}]}
"""
import logging

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response

logger = logging.getLogger(__name__)


DEFAULT_VALIDATION_MESSAGE = 'Please fill in all required fields correctly.'
DEFAULT_ERROR_MESSAGE = 'An error occurred. Please try again.'


class StorageError(Exception):
    """Raised when the database cannot be reached or a query fails."""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


class ConstraintError(StorageError):
    """Raised when a write violates a database constraint (e.g. unique username)."""
    pass


class ExternalServiceError(Exception):
    """Raised when a third-party provider (email) rejects or fails a request."""
    pass


def flatten_errors(detail, prefix=''):
    """
    Flatten a DRF error detail into a list of ``{field, message}`` entries.

    Every failing field is reported, not just the first one.
    """
    errors = []
    if isinstance(detail, dict):
        for field, value in detail.items():
            name = f'{prefix}.{field}' if prefix else str(field)
            errors.extend(flatten_errors(value, name))
    elif isinstance(detail, list):
        for item in detail:
            if isinstance(item, (dict, list)):
                errors.extend(flatten_errors(item, prefix))
            else:
                errors.append({'field': prefix or 'non_field_errors', 'message': str(item)})
    else:
        errors.append({'field': prefix or 'non_field_errors', 'message': str(detail)})
    return errors


def api_exception_handler(exc, context):
    """
    DRF exception handler for all API views.

    - ValidationError -> 400 with per-field errors
    - Http404 / NotFound -> 404
    - other APIException -> its own status code
    - anything else (StorageError included) -> 500, detail logged server-side only

    Views may set ``validation_error_message`` and ``error_message`` to
    customise the user-facing message.
    """
    view = context.get('view')
    validation_message = getattr(view, 'validation_error_message', DEFAULT_VALIDATION_MESSAGE)
    error_message = getattr(view, 'error_message', DEFAULT_ERROR_MESSAGE)

    if isinstance(exc, ValidationError):
        return Response(
            {
                'success': False,
                'message': validation_message,
                'errors': flatten_errors(exc.detail),
            },
            status=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, Http404):
        return Response(
            {'success': False, 'message': 'Not found.'},
            status=status.HTTP_404_NOT_FOUND
        )

    if isinstance(exc, APIException):
        return Response(
            {'success': False, 'message': str(exc.detail)},
            status=exc.status_code
        )

    view_name = view.__class__.__name__ if view else 'unknown view'
    logger.exception(f"Unhandled error in {view_name}: {exc}")
    return Response(
        {'success': False, 'message': error_message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
