"""
Lead capture flow against the ORM-backed storage.

Requests go through the same DatabaseStorage used in production; the stats
fan-out runs real queries from its worker threads.
"""
import threading

import pytest
from django.db import connections
from rest_framework import status

from contact.models import ContactSubmission
from tracking.models import ButtonClick


@pytest.mark.usefixtures('db_storage')
class TestDatabaseLeadFlow:

    def test_submission_appears_in_listing(self, api_client, contact_payload):
        response = api_client.post('/api/contact', contact_payload, format='json')
        assert response.status_code == status.HTTP_200_OK
        submission_id = response.data['submissionId']

        rows = api_client.get('/api/dashboard/submissions').data['data']

        assert [row['id'] for row in rows] == [submission_id]
        assert rows[0]['addressed'] is False
        assert rows[0]['createdAt']
        assert ContactSubmission.objects.filter(pk=submission_id).exists()

    def test_stats_fan_out(self, api_client, contact_payload):
        api_client.post('/api/contact', contact_payload, format='json')
        api_client.post('/api/track-click', {'buttonType': 'call', 'buttonLabel': 'Call Now'}, format='json')
        api_client.post('/api/track-click', {'buttonType': 'call', 'buttonLabel': 'Call Now'}, format='json')
        api_client.post('/api/track-click', {'buttonType': 'email', 'buttonLabel': 'Email Us'}, format='json')

        response = api_client.get('/api/dashboard/stats')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['totalSubmissions'] == 1
        assert data['totalClicks'] == 3
        assert data['clickStats'] == [
            {'buttonType': 'call', 'buttonLabel': 'Call Now', 'count': 2},
            {'buttonType': 'email', 'buttonLabel': 'Email Us', 'count': 1},
        ]
        assert data['recentSubmissions'][0]['name'] == 'Jane Doe'
        assert len(data['recentClicks']) == 3
        assert ButtonClick.objects.count() == 3

    def test_worker_threads_release_connections(self, api_client, contact_payload, monkeypatch):
        close_all = connections.close_all
        closing_threads = []

        def record_close_all():
            closing_threads.append(threading.get_ident())
            close_all()

        monkeypatch.setattr(connections, 'close_all', record_close_all)
        api_client.post('/api/contact', contact_payload, format='json')

        response = api_client.get('/api/dashboard/stats')

        assert response.status_code == status.HTTP_200_OK
        assert len(closing_threads) == 4
        assert threading.get_ident() not in closing_threads

    def test_delete_is_idempotent(self, api_client, contact_payload):
        submission_id = api_client.post('/api/contact', contact_payload, format='json').data['submissionId']
        url = f'/api/dashboard/submissions/{submission_id}'

        assert api_client.delete(url).status_code == status.HTTP_200_OK
        assert api_client.delete(url).status_code == status.HTTP_200_OK

        assert api_client.get(url).status_code == status.HTTP_404_NOT_FOUND
        assert api_client.get('/api/dashboard/stats').data['data']['totalSubmissions'] == 0

    def test_addressed_and_bulk_delete(self, api_client, contact_payload):
        first = api_client.post('/api/contact', contact_payload, format='json').data['submissionId']
        second = api_client.post('/api/contact', contact_payload, format='json').data['submissionId']

        api_client.post(f'/api/dashboard/submissions/{first}/addressed')
        addressed = api_client.get('/api/dashboard/submissions', {'addressed': 'true'}).data['data']
        assert [row['id'] for row in addressed] == [first]

        response = api_client.post(
            '/api/dashboard/submissions/bulk-delete', {'ids': [first, second, first]}, format='json'
        )
        assert response.data == {'success': True, 'count': 2}
        assert ContactSubmission.objects.count() == 0
