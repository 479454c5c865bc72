"""
Storage Interface

Every backend implements the same operations so the API layer can be handed
either the ORM-backed store or the in-memory one used by tests.
"""
from typing import Any, Dict, Iterable, List, Optional


DEFAULT_SUBMISSION_LIMIT = 50
DEFAULT_CLICK_LIMIT = 100


class BaseStorage:
    """
    Contract shared by all storage backends.

    Conventions:
    - Records are ``accounts.User``, ``contact.ContactSubmission`` and
      ``tracking.ButtonClick`` instances.
    - Identifiers are accepted as ``str`` or ``uuid.UUID``; malformed ids are
      treated as absent.
    - Mutations on absent ids are no-ops.
    - Listings are newest first. The order of records with identical
      timestamps is backend specific: InMemoryStorage keeps insertion order,
      DatabaseStorage orders them by id descending. Callers must not rely on it.
    - Failures raise ``core.exceptions.StorageError`` (``ConstraintError`` for
      constraint violations). Nothing is retried.
    """

    # Users

    def create_user(self, data: Dict[str, Any]):
        raise NotImplementedError

    def get_user(self, user_id):
        raise NotImplementedError

    def get_user_by_username(self, username: str):
        raise NotImplementedError

    # Contact submissions

    def create_contact_submission(self, data: Dict[str, Any]):
        raise NotImplementedError

    def get_contact_submissions(
        self,
        limit: int = DEFAULT_SUBMISSION_LIMIT,
        addressed: Optional[bool] = None,
        search: Optional[str] = None
    ) -> List:
        raise NotImplementedError

    def get_contact_submission_by_id(self, submission_id):
        raise NotImplementedError

    def count_contact_submissions(self) -> int:
        raise NotImplementedError

    def delete_contact_submission(self, submission_id) -> None:
        raise NotImplementedError

    def delete_contact_submissions(self, submission_ids: Iterable) -> int:
        raise NotImplementedError

    def mark_contact_submission_addressed(self, submission_id) -> None:
        raise NotImplementedError

    def mark_contact_submissions_addressed(self, submission_ids: Iterable) -> int:
        raise NotImplementedError

    def edit_contact_submission(self, submission_id, data: Dict[str, Any]) -> None:
        raise NotImplementedError

    # Button clicks

    def track_button_click(self, data: Dict[str, Any]):
        raise NotImplementedError

    def get_button_clicks(
        self,
        limit: int = DEFAULT_CLICK_LIMIT,
        button_type: Optional[str] = None
    ) -> List:
        raise NotImplementedError

    def get_button_click_stats(self) -> List[Dict[str, Any]]:
        """
        Group all clicks by (button type, button label).

        Returns:
            list of ``{'buttonType', 'buttonLabel', 'count'}`` ordered by count
            descending, then button type and label ascending.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the calling thread."""
        pass


def editable_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the five editable submission fields; a missing phone becomes None."""
    from contact.models import ContactSubmission

    values = {field: data.get(field) for field in ContactSubmission.EDITABLE_FIELDS}
    if not values['phone']:
        values['phone'] = None
    return values
