"""
In-Memory Storage

Process-local implementation of the storage interface. Records are unsaved
model instances kept in dictionaries, so serializers treat them exactly like
rows loaded from the database. Used by the test suite and for local demos
(``LEADS_STORAGE_BACKEND=core.storage.InMemoryStorage``).
"""
import copy
import itertools
import threading
import uuid
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from django.contrib.auth.hashers import make_password
from django.utils import timezone

from core.exceptions import ConstraintError
from .base import (
    BaseStorage,
    DEFAULT_CLICK_LIMIT,
    DEFAULT_SUBMISSION_LIMIT,
    editable_values,
)
from .database import parse_id, parse_ids


class InMemoryStorage(BaseStorage):
    """
    Thread-safe dictionary-backed storage.

    Returned records are copies; mutating them does not change stored state.
    Newest-first ordering falls back to insertion order when timestamps tie.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        self._users = {}
        self._submissions = {}
        self._clicks = {}
        self._order = {}

    def _next(self, pk):
        self._order[pk] = next(self._sequence)

    def _newest_first(self, records, timestamp_field):
        return sorted(
            records,
            key=lambda record: (getattr(record, timestamp_field), self._order[record.pk]),
            reverse=True
        )

    # Users

    def create_user(self, data: Dict[str, Any]):
        from accounts.models import User

        with self._lock:
            if any(user.username == data['username'] for user in self._users.values()):
                raise ConstraintError(
                    f"Username {data['username']} already exists",
                    operation='create_user'
                )
            user = User(
                id=uuid.uuid4(),
                username=data['username'],
                password=make_password(data['password']),
            )
            self._users[user.pk] = user
            self._next(user.pk)
            return copy.copy(user)

    def get_user(self, user_id):
        pk = parse_id(user_id)
        with self._lock:
            user = self._users.get(pk)
            return copy.copy(user) if user else None

    def get_user_by_username(self, username: str):
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return copy.copy(user)
        return None

    # Contact submissions

    def create_contact_submission(self, data: Dict[str, Any]):
        from contact.models import ContactSubmission

        submission = ContactSubmission(
            id=uuid.uuid4(),
            created_at=timezone.now(),
            addressed=False,
            user_agent=data.get('user_agent'),
            ip=data.get('ip'),
            **editable_values(data),
        )
        with self._lock:
            self._submissions[submission.pk] = submission
            self._next(submission.pk)
        return copy.copy(submission)

    def get_contact_submissions(
        self,
        limit: int = DEFAULT_SUBMISSION_LIMIT,
        addressed: Optional[bool] = None,
        search: Optional[str] = None
    ) -> List:
        with self._lock:
            records = list(self._submissions.values())
            if addressed is not None:
                records = [record for record in records if record.addressed == addressed]
            if search:
                needle = search.lower()
                records = [
                    record for record in records
                    if any(
                        needle in (getattr(record, field) or '').lower()
                        for field in ('name', 'email', 'phone', 'service', 'message')
                    )
                ]
            records = self._newest_first(records, 'created_at')[:limit]
            return [copy.copy(record) for record in records]

    def get_contact_submission_by_id(self, submission_id):
        pk = parse_id(submission_id)
        with self._lock:
            submission = self._submissions.get(pk)
            return copy.copy(submission) if submission else None

    def count_contact_submissions(self) -> int:
        with self._lock:
            return len(self._submissions)

    def delete_contact_submission(self, submission_id) -> None:
        self.delete_contact_submissions([submission_id])

    def delete_contact_submissions(self, submission_ids: Iterable) -> int:
        deleted = 0
        with self._lock:
            for pk in set(parse_ids(submission_ids)):
                if self._submissions.pop(pk, None) is not None:
                    self._order.pop(pk, None)
                    deleted += 1
        return deleted

    def mark_contact_submission_addressed(self, submission_id) -> None:
        self.mark_contact_submissions_addressed([submission_id])

    def mark_contact_submissions_addressed(self, submission_ids: Iterable) -> int:
        updated = 0
        with self._lock:
            for pk in set(parse_ids(submission_ids)):
                submission = self._submissions.get(pk)
                if submission is not None:
                    submission.addressed = True
                    updated += 1
        return updated

    def edit_contact_submission(self, submission_id, data: Dict[str, Any]) -> None:
        pk = parse_id(submission_id)
        with self._lock:
            submission = self._submissions.get(pk)
            if submission is None:
                return
            for field, value in editable_values(data).items():
                setattr(submission, field, value)

    # Button clicks

    def track_button_click(self, data: Dict[str, Any]):
        from tracking.models import ButtonClick

        click = ButtonClick(
            id=uuid.uuid4(),
            clicked_at=timezone.now(),
            button_type=data['button_type'],
            button_label=data['button_label'],
            ip_address=data.get('ip_address'),
            user_agent=data.get('user_agent'),
            metadata=copy.deepcopy(data.get('metadata')),
        )
        with self._lock:
            self._clicks[click.pk] = click
            self._next(click.pk)
        return copy.copy(click)

    def get_button_clicks(
        self,
        limit: int = DEFAULT_CLICK_LIMIT,
        button_type: Optional[str] = None
    ) -> List:
        with self._lock:
            records = list(self._clicks.values())
            if button_type:
                records = [record for record in records if record.button_type == button_type]
            records = self._newest_first(records, 'clicked_at')[:limit]
            return [copy.copy(record) for record in records]

    def get_button_click_stats(self) -> List[Dict[str, Any]]:
        with self._lock:
            counts = Counter(
                (click.button_type, click.button_label) for click in self._clicks.values()
            )

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0][0], item[0][1]))
        return [
            {'buttonType': button_type, 'buttonLabel': button_label, 'count': count}
            for (button_type, button_label), count in ranked
        ]
