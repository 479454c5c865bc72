"""
Management command that polls the dashboard stats endpoint.

Mirrors the dashboard's 30 second refresh from a terminal.

Usage:
    python manage.py watch_dashboard --base-url http://localhost:8000
    python manage.py watch_dashboard --interval 10 --iterations 3
"""
from django.core.management.base import BaseCommand

from core.api_client import DEFAULT_POLL_INTERVAL, DashboardClient


class Command(BaseCommand):
    help = 'Poll /api/dashboard/stats and print the overview'

    def add_arguments(self, parser):
        parser.add_argument(
            '--base-url',
            type=str,
            default='http://localhost:8000',
            help='Base URL of the API server'
        )
        parser.add_argument(
            '--interval',
            type=float,
            default=DEFAULT_POLL_INTERVAL,
            help='Seconds between refreshes (default: 30)'
        )
        parser.add_argument(
            '--iterations',
            type=int,
            default=None,
            help='Stop after this many refreshes (default: run forever)'
        )

    def handle(self, *args, **options):
        client = DashboardClient(options['base_url'])

        self.stdout.write(self.style.SUCCESS(
            f"Watching {client.api_url('/api/dashboard/stats')} every {options['interval']}s"
        ))

        try:
            client.poll_stats(
                self.write_stats,
                interval=options['interval'],
                iterations=options['iterations'],
            )
        except KeyboardInterrupt:
            self.stdout.write('\nStopped.')

    def write_stats(self, stats):
        self.stdout.write('=' * 60)
        self.stdout.write(
            f"Submissions: {stats['totalSubmissions']}   Clicks: {stats.get('totalClicks', 0)}"
        )

        self.stdout.write('\nClicks by button:')
        if not stats['clickStats']:
            self.stdout.write('  (none)')
        for row in stats['clickStats']:
            self.stdout.write(f"  {row['buttonType']:<10} {row['buttonLabel']:<30} {row['count']}")

        self.stdout.write('\nRecent submissions:')
        if not stats['recentSubmissions']:
            self.stdout.write('  (none)')
        for submission in stats['recentSubmissions']:
            marker = '✓' if submission.get('addressed') else '•'
            self.stdout.write(
                f"  {marker} {submission['createdAt']}  {submission['name']} <{submission['email']}>"
                f"  [{submission['service']}]"
            )
