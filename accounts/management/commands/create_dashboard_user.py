"""
Management command to create a dashboard user.

Usage:
    python manage.py create_dashboard_user <username>
    python manage.py create_dashboard_user <username> --password <password>
"""
import getpass

from django.core.management.base import BaseCommand, CommandError

from core.apps import get_storage
from core.exceptions import ConstraintError


class Command(BaseCommand):
    help = 'Creates a user for the leads dashboard'

    def add_arguments(self, parser):
        parser.add_argument('username', type=str)
        parser.add_argument(
            '--password',
            type=str,
            help='Password for the new user (prompted if omitted)'
        )

    def handle(self, *args, **options):
        username = options['username'].strip()
        if not username:
            raise CommandError('Username must not be empty.')

        password = options.get('password')
        if not password:
            password = getpass.getpass('Password: ')
            if password != getpass.getpass('Password (again): '):
                raise CommandError('Passwords do not match.')
        if not password:
            raise CommandError('Password must not be empty.')

        try:
            user = get_storage().create_user({'username': username, 'password': password})
        except ConstraintError:
            raise CommandError(f'User {username} already exists.')

        self.stdout.write(self.style.SUCCESS(f'✓ Created dashboard user: {user.username}'))
        self.stdout.write(f'  ID: {user.pk}')
