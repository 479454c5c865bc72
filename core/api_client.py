"""
Leads API Clients

Python clients for the public and dashboard HTTP APIs:
- PublicFormClient: submits the contact form and fires click beacons
- DashboardClient: reads submissions/clicks/stats and issues dashboard mutations

Usage:
    from core.api_client import DashboardClient, PublicFormClient

    site = PublicFormClient('https://api.brightelectricals.co.in')
    result = site.submit_contact({
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'service': 'Wiring',
        'message': 'Need a quote',
    })

    dashboard = DashboardClient('https://api.brightelectricals.co.in')
    stats = dashboard.get_stats()
    dashboard.mark_addressed(result['submissionId'])
"""

import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional

import requests

logger = logging.getLogger(__name__)


DEFAULT_POLL_INTERVAL = 30  # seconds


class LeadsAPIError(Exception):
    """Raised when the leads API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: int = None, errors: list = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class BaseAPIClient:
    """Shared request handling for the leads API."""

    def __init__(self, base_url: str, timeout: int = 15, session: requests.Session = None):
        self.base_url = (base_url or '').rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def api_url(self, path: str) -> str:
        if not path.startswith('/'):
            path = f'/{path}'
        return f'{self.base_url}{path}'

    def _request(
        self,
        method: str,
        path: str,
        data: Any = None,
        params: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """
        Make an HTTP request and return the decoded JSON body.

        Raises:
            LeadsAPIError: on network failure, non-JSON body or success=false
        """
        url = self.api_url(path)

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=data,
                params=params,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.error(f"Leads API timeout: {method} {path}")
            raise LeadsAPIError("Request timed out. Please try again.")
        except requests.exceptions.ConnectionError:
            logger.error(f"Leads API connection error: {method} {path}")
            raise LeadsAPIError("Unable to connect to the server. Please try again.")

        try:
            result = response.json()
        except ValueError:
            raise LeadsAPIError(
                f"Unexpected response from {path}",
                status_code=response.status_code
            )

        if not isinstance(result, dict):
            raise LeadsAPIError(
                f"Unexpected response from {path}",
                status_code=response.status_code
            )

        if not response.ok or not result.get('success'):
            message = result.get('message', 'Request failed')
            logger.warning(f"Leads API error on {method} {path}: {response.status_code} {message}")
            raise LeadsAPIError(
                message,
                status_code=response.status_code,
                errors=result.get('errors')
            )

        return result


class PublicFormClient(BaseAPIClient):
    """Client used by the public site: contact form and click beacons."""

    def submit_contact(self, form_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Submit the contact form.

        Returns:
            dict with success, message, submissionId

        Raises:
            LeadsAPIError: with ``errors`` populated on validation failure
        """
        return self._request('POST', '/api/contact', data=form_data)

    def track_click(
        self,
        button_type: str,
        button_label: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Fire a click beacon.

        Tracking must never break the page, so failures are logged and
        reported as False.
        """
        payload = {'buttonType': button_type, 'buttonLabel': button_label}
        if metadata is not None:
            payload['metadata'] = metadata

        try:
            self._request('POST', '/api/track-click', data=payload)
        except LeadsAPIError as exc:
            logger.warning(f"Click tracking failed for {button_type}/{button_label}: {exc.message}")
            return False
        return True


class DashboardClient(BaseAPIClient):
    """Client for the internal leads dashboard API."""

    def get_stats(self) -> Dict[str, Any]:
        return self._request('GET', '/api/dashboard/stats')['data']

    def list_submissions(
        self,
        limit: int = None,
        addressed: Optional[bool] = None,
        search: str = None
    ) -> List[Dict[str, Any]]:
        params = {}
        if limit is not None:
            params['limit'] = limit
        if addressed is not None:
            params['addressed'] = 'true' if addressed else 'false'
        if search:
            params['search'] = search
        return self._request('GET', '/api/dashboard/submissions', params=params)['data']

    def get_submission(self, submission_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/api/dashboard/submissions/{submission_id}')['data']

    def list_clicks(self, limit: int = None, button_type: str = None) -> List[Dict[str, Any]]:
        params = {}
        if limit is not None:
            params['limit'] = limit
        if button_type:
            params['buttonType'] = button_type
        return self._request('GET', '/api/dashboard/clicks', params=params)['data']

    def edit_submission(self, submission_id: str, fields: Dict[str, Any]) -> None:
        payload = {
            key: fields.get(key)
            for key in ('name', 'email', 'phone', 'service', 'message')
        }
        self._request('PUT', f'/api/dashboard/submissions/{submission_id}', data=payload)

    def delete_submission(self, submission_id: str) -> None:
        self._request('DELETE', f'/api/dashboard/submissions/{submission_id}')

    def mark_addressed(self, submission_id: str) -> None:
        self._request('POST', f'/api/dashboard/submissions/{submission_id}/addressed')

    def bulk_delete(self, submission_ids: Iterable[str]) -> int:
        result = self._request(
            'POST', '/api/dashboard/submissions/bulk-delete',
            data={'ids': list(submission_ids)}
        )
        return result.get('count', 0)

    def bulk_mark_addressed(self, submission_ids: Iterable[str]) -> int:
        result = self._request(
            'POST', '/api/dashboard/submissions/bulk-addressed',
            data={'ids': list(submission_ids)}
        )
        return result.get('count', 0)

    def poll_stats(
        self,
        callback: Callable[[Dict[str, Any]], None],
        interval: float = DEFAULT_POLL_INTERVAL,
        iterations: int = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> None:
        """
        Fetch the stats every ``interval`` seconds and pass them to ``callback``.

        Runs forever unless ``iterations`` is given. A failed fetch is logged
        and retried on the next tick.
        """
        count = 0
        while iterations is None or count < iterations:
            try:
                callback(self.get_stats())
            except LeadsAPIError as exc:
                logger.error(f"Dashboard stats poll failed: {exc.message}")
            count += 1
            if iterations is None or count < iterations:
                sleep(interval)
