"""
Database Storage

Django ORM implementation of the storage interface.
"""
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

from django.db import DatabaseError, IntegrityError, connections, transaction
from django.db.models import Count, Q

from core.exceptions import ConstraintError, StorageError
from .base import (
    BaseStorage,
    DEFAULT_CLICK_LIMIT,
    DEFAULT_SUBMISSION_LIMIT,
    editable_values,
)

logger = logging.getLogger(__name__)


def parse_id(value) -> Optional[uuid.UUID]:
    """Return the UUID for ``value`` or None when it is not a valid id."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


def parse_ids(values: Iterable) -> List[uuid.UUID]:
    return [parsed for parsed in (parse_id(value) for value in values) if parsed]


@contextmanager
def storage_errors(operation: str):
    """Translate database exceptions raised inside the block."""
    try:
        yield
    except IntegrityError as exc:
        logger.warning(f"Constraint violation during {operation}: {exc}")
        raise ConstraintError(f"Constraint violation during {operation}", operation=operation) from exc
    except DatabaseError as exc:
        logger.error(f"Database error during {operation}: {exc}")
        raise StorageError(f"Database error during {operation}", operation=operation) from exc


class DatabaseStorage(BaseStorage):
    """
    Storage backed by the Django ORM.

    Usage:
        storage = DatabaseStorage()
        submission = storage.create_contact_submission({
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'service': 'Wiring',
            'message': 'Need a quote',
        })
        storage.mark_contact_submission_addressed(submission.id)
    """

    # =========================================================================
    # USERS
    # =========================================================================

    def create_user(self, data: Dict[str, Any]):
        from accounts.models import User

        with storage_errors('create_user'):
            # Savepoint so a duplicate username does not poison an outer transaction
            with transaction.atomic():
                return User.objects.create_user(
                    username=data['username'],
                    password=data['password'],
                )

    def get_user(self, user_id):
        from accounts.models import User

        pk = parse_id(user_id)
        if pk is None:
            return None
        with storage_errors('get_user'):
            return User.objects.filter(pk=pk).first()

    def get_user_by_username(self, username: str):
        from accounts.models import User

        with storage_errors('get_user_by_username'):
            return User.objects.filter(username=username).first()

    # =========================================================================
    # CONTACT SUBMISSIONS
    # =========================================================================

    def create_contact_submission(self, data: Dict[str, Any]):
        from contact.models import ContactSubmission

        with storage_errors('create_contact_submission'):
            return ContactSubmission.objects.create(
                **editable_values(data),
                user_agent=data.get('user_agent'),
                ip=data.get('ip'),
            )

    def get_contact_submissions(
        self,
        limit: int = DEFAULT_SUBMISSION_LIMIT,
        addressed: Optional[bool] = None,
        search: Optional[str] = None
    ) -> List:
        from contact.models import ContactSubmission

        queryset = ContactSubmission.objects.all()
        if addressed is not None:
            queryset = queryset.filter(addressed=addressed)
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(email__icontains=search) |
                Q(phone__icontains=search) |
                Q(service__icontains=search) |
                Q(message__icontains=search)
            )

        with storage_errors('get_contact_submissions'):
            return list(queryset.order_by('-created_at', '-id')[:limit])

    def get_contact_submission_by_id(self, submission_id):
        from contact.models import ContactSubmission

        pk = parse_id(submission_id)
        if pk is None:
            return None
        with storage_errors('get_contact_submission_by_id'):
            return ContactSubmission.objects.filter(pk=pk).first()

    def count_contact_submissions(self) -> int:
        from contact.models import ContactSubmission

        with storage_errors('count_contact_submissions'):
            return ContactSubmission.objects.count()

    def delete_contact_submission(self, submission_id) -> None:
        self.delete_contact_submissions([submission_id])

    def delete_contact_submissions(self, submission_ids: Iterable) -> int:
        from contact.models import ContactSubmission

        pks = parse_ids(submission_ids)
        if not pks:
            return 0
        with storage_errors('delete_contact_submissions'):
            deleted, _ = ContactSubmission.objects.filter(pk__in=pks).delete()
        return deleted

    def mark_contact_submission_addressed(self, submission_id) -> None:
        self.mark_contact_submissions_addressed([submission_id])

    def mark_contact_submissions_addressed(self, submission_ids: Iterable) -> int:
        from contact.models import ContactSubmission

        pks = parse_ids(submission_ids)
        if not pks:
            return 0
        with storage_errors('mark_contact_submissions_addressed'):
            return ContactSubmission.objects.filter(pk__in=pks).update(addressed=True)

    def edit_contact_submission(self, submission_id, data: Dict[str, Any]) -> None:
        from contact.models import ContactSubmission

        pk = parse_id(submission_id)
        if pk is None:
            return
        with storage_errors('edit_contact_submission'):
            ContactSubmission.objects.filter(pk=pk).update(**editable_values(data))

    # =========================================================================
    # BUTTON CLICKS
    # =========================================================================

    def track_button_click(self, data: Dict[str, Any]):
        from tracking.models import ButtonClick

        with storage_errors('track_button_click'):
            return ButtonClick.objects.create(
                button_type=data['button_type'],
                button_label=data['button_label'],
                ip_address=data.get('ip_address'),
                user_agent=data.get('user_agent'),
                metadata=data.get('metadata'),
            )

    def get_button_clicks(
        self,
        limit: int = DEFAULT_CLICK_LIMIT,
        button_type: Optional[str] = None
    ) -> List:
        from tracking.models import ButtonClick

        queryset = ButtonClick.objects.all()
        if button_type:
            queryset = queryset.filter(button_type=button_type)

        with storage_errors('get_button_clicks'):
            return list(queryset.order_by('-clicked_at', '-id')[:limit])

    def get_button_click_stats(self) -> List[Dict[str, Any]]:
        from tracking.models import ButtonClick

        rows = (
            ButtonClick.objects
            .order_by()
            .values('button_type', 'button_label')
            .annotate(count=Count('id'))
            .order_by('-count', 'button_type', 'button_label')
        )

        with storage_errors('get_button_click_stats'):
            return [
                {
                    'buttonType': row['button_type'],
                    'buttonLabel': row['button_label'],
                    'count': row['count'],
                }
                for row in rows
            ]

    def close(self) -> None:
        # Connections are per thread; fan-out workers must not leak theirs
        connections.close_all()
