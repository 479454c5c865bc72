"""
End-to-end lead capture flow.

A visitor submits the contact form and clicks call-to-action buttons; staff
then review, edit, acknowledge and clean up through the dashboard API.
"""
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework import status


@pytest.mark.usefixtures('memory_storage')
class TestLeadCaptureFlow:

    def test_submission_to_dashboard(self, api_client, contact_payload):
        response = api_client.post('/api/contact', contact_payload, format='json')
        assert response.status_code == status.HTTP_200_OK
        submission_id = response.data['submissionId']

        for label in ('Call Now', 'Call Now'):
            api_client.post('/api/track-click', {'buttonType': 'call', 'buttonLabel': label}, format='json')
        api_client.post('/api/track-click', {'buttonType': 'whatsapp', 'buttonLabel': 'WhatsApp'}, format='json')

        stats = api_client.get('/api/dashboard/stats').data['data']
        assert stats['totalSubmissions'] == 1
        assert stats['totalClicks'] == 3
        assert stats['clickStats'][0] == {'buttonType': 'call', 'buttonLabel': 'Call Now', 'count': 2}
        assert stats['recentSubmissions'][0]['id'] == submission_id
        assert stats['recentSubmissions'][0]['addressed'] is False

        edited = {**contact_payload, 'service': 'Solar Installation'}
        api_client.put(f'/api/dashboard/submissions/{submission_id}', edited, format='json')
        api_client.post(f'/api/dashboard/submissions/{submission_id}/addressed')

        row = api_client.get(f'/api/dashboard/submissions/{submission_id}').data['data']
        assert row['service'] == 'Solar Installation'
        assert row['addressed'] is True

        api_client.delete(f'/api/dashboard/submissions/{submission_id}')
        stats = api_client.get('/api/dashboard/stats').data['data']
        assert stats['totalSubmissions'] == 0
        assert stats['recentSubmissions'] == []
        assert stats['totalClicks'] == 3


class TestManagementCommands:

    def test_create_dashboard_user(self, memory_storage):
        out = StringIO()

        call_command('create_dashboard_user', 'hussain', '--password', 's3cret-pass', stdout=out)

        assert 'Created dashboard user: hussain' in out.getvalue()
        assert memory_storage.get_user_by_username('hussain').check_password('s3cret-pass')

    def test_create_dashboard_user_duplicate(self, memory_storage):
        memory_storage.create_user({'username': 'hussain', 'password': 'one'})

        with pytest.raises(CommandError, match='already exists'):
            call_command('create_dashboard_user', 'hussain', '--password', 'two', stdout=StringIO())

    def test_watch_dashboard(self):
        stats = {
            'clickStats': [{'buttonType': 'call', 'buttonLabel': 'Call Now', 'count': 4}],
            'totalSubmissions': 1,
            'totalClicks': 4,
            'recentSubmissions': [{
                'name': 'Jane Doe', 'email': 'jane@example.com', 'service': 'Wiring',
                'createdAt': '2026-01-01T10:00:00+05:30', 'addressed': False,
            }],
            'recentClicks': [],
        }
        out = StringIO()

        with patch('core.api_client.DashboardClient.get_stats', return_value=stats):
            call_command('watch_dashboard', '--iterations', '1', stdout=out)

        output = out.getvalue()
        assert 'Submissions: 1' in output
        assert 'Call Now' in output
        assert 'Jane Doe <jane@example.com>' in output
