"""
Leads Dashboard Service

Aggregates contact submissions and click events for the internal dashboard:
- Click statistics by button
- Most recent submissions and clicks
- Submission and click totals
"""
import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings

logger = logging.getLogger(__name__)


class LeadsDashboardService:
    """Service for the leads dashboard overview."""

    RECENT_LIMIT = 10

    def __init__(self, storage, max_workers=None):
        self.storage = storage
        self.max_workers = max_workers or getattr(settings, 'DASHBOARD_STATS_WORKERS', 4)

    def _run(self, func, *args):
        try:
            return func(*args)
        finally:
            self.storage.close()

    def get_overview_stats(self):
        """
        Get the dashboard overview.

        The reads are independent, so they run concurrently and the call
        returns once all of them have finished. A failure in any of them
        propagates to the caller.

        Returns:
            dict: clickStats, totalSubmissions, totalClicks,
                  recentSubmissions, recentClicks
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                'clickStats': executor.submit(self._run, self.storage.get_button_click_stats),
                'recentSubmissions': executor.submit(
                    self._run, self.storage.get_contact_submissions, self.RECENT_LIMIT
                ),
                'recentClicks': executor.submit(
                    self._run, self.storage.get_button_clicks, self.RECENT_LIMIT
                ),
                'totalSubmissions': executor.submit(self._run, self.storage.count_contact_submissions),
            }
            results = {key: future.result() for key, future in futures.items()}

        results['totalClicks'] = sum(stat['count'] for stat in results['clickStats'])
        logger.debug(
            f"Dashboard overview: {results['totalSubmissions']} submissions, "
            f"{results['totalClicks']} clicks"
        )
        return results
