"""
Tests for the leads dashboard API.
Covers listing, editing, acknowledging, deleting, bulk actions and stats.
"""
import uuid

import pytest
from rest_framework import status

BASE_URL = '/api/dashboard'


@pytest.fixture
def submissions(memory_storage):
    """Three submissions, created oldest first."""
    created = []
    for index, service in enumerate(['Wiring', 'Solar Installation', 'Inverter Repair']):
        created.append(memory_storage.create_contact_submission({
            'name': f'Customer {index}',
            'email': f'customer{index}@example.com',
            'phone': None,
            'service': service,
            'message': f'Enquiry about {service.lower()}',
        }))
    return created


@pytest.fixture
def clicks(memory_storage):
    rows = [
        ('call', 'Call Now'),
        ('whatsapp', 'Chat on WhatsApp'),
        ('call', 'Call Now'),
        ('email', 'Email Us'),
        ('whatsapp', 'Chat on WhatsApp'),
        ('call', 'Call Now'),
    ]
    return [
        memory_storage.track_button_click({'button_type': button_type, 'button_label': label})
        for button_type, label in rows
    ]


class TestSubmissionList:
    """GET /api/dashboard/submissions"""

    def test_newest_first(self, api_client, submissions):
        response = api_client.get(f'{BASE_URL}/submissions')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        names = [row['name'] for row in response.data['data']]
        assert names == ['Customer 2', 'Customer 1', 'Customer 0']

    def test_camel_case_fields(self, api_client, submissions):
        row = api_client.get(f'{BASE_URL}/submissions').data['data'][0]

        assert set(row) == {
            'id', 'name', 'email', 'phone', 'service', 'message',
            'createdAt', 'userAgent', 'ip', 'addressed'
        }
        assert row['addressed'] is False

    def test_limit(self, api_client, submissions):
        response = api_client.get(f'{BASE_URL}/submissions', {'limit': 2})

        assert [row['name'] for row in response.data['data']] == ['Customer 2', 'Customer 1']

    @pytest.mark.parametrize('limit', ['0', '-3', 'abc'])
    def test_invalid_limit(self, api_client, memory_storage, limit):
        response = api_client.get(f'{BASE_URL}/submissions', {'limit': limit})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'][0]['field'] == 'limit'

    def test_limit_capped(self, api_client, submissions, settings):
        settings.DASHBOARD_MAX_LIMIT = 1

        response = api_client.get(f'{BASE_URL}/submissions', {'limit': 100})

        assert len(response.data['data']) == 1

    def test_empty_store(self, api_client, memory_storage):
        response = api_client.get(f'{BASE_URL}/submissions')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data'] == []

    def test_filter_addressed(self, api_client, memory_storage, submissions):
        memory_storage.mark_contact_submission_addressed(submissions[0].id)

        addressed = api_client.get(f'{BASE_URL}/submissions', {'addressed': 'true'}).data['data']
        pending = api_client.get(f'{BASE_URL}/submissions', {'addressed': 'false'}).data['data']

        assert [row['name'] for row in addressed] == ['Customer 0']
        assert [row['name'] for row in pending] == ['Customer 2', 'Customer 1']

    @pytest.mark.parametrize('value', ['maybe', '2'])
    def test_invalid_addressed_filter(self, api_client, submissions, value):
        response = api_client.get(f'{BASE_URL}/submissions', {'addressed': value})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errors'] == [
            {'field': 'addressed', 'message': 'addressed must be true or false.'}
        ]

    def test_blank_addressed_filter_ignored(self, api_client, submissions):
        response = api_client.get(f'{BASE_URL}/submissions', {'addressed': ''})

        assert len(response.data['data']) == 3

    def test_search(self, api_client, submissions):
        response = api_client.get(f'{BASE_URL}/submissions', {'search': 'solar'})

        assert [row['service'] for row in response.data['data']] == ['Solar Installation']


class TestSubmissionDetail:
    """GET / PUT / DELETE /api/dashboard/submissions/:id"""

    def test_get(self, api_client, submissions):
        response = api_client.get(f'{BASE_URL}/submissions/{submissions[1].id}')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['name'] == 'Customer 1'

    @pytest.mark.parametrize('submission_id', [str(uuid.uuid4()), 'not-a-uuid'])
    def test_get_missing(self, api_client, memory_storage, submission_id):
        response = api_client.get(f'{BASE_URL}/submissions/{submission_id}')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['success'] is False

    def test_edit_round_trip(self, api_client, memory_storage, submissions):
        target = submissions[0]
        payload = {
            'name': 'Customer Zero',
            'email': 'zero@example.com',
            'phone': '+91 90000 00000',
            'service': 'Wiring',
            'message': 'Updated message',
        }

        response = api_client.put(f'{BASE_URL}/submissions/{target.id}', payload, format='json')
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}

        row = api_client.get(f'{BASE_URL}/submissions/{target.id}').data['data']
        assert row['name'] == 'Customer Zero'
        assert row['email'] == 'zero@example.com'
        assert row['phone'] == '+91 90000 00000'
        assert row['message'] == 'Updated message'
        assert row['id'] == str(target.id)
        assert row['addressed'] is False

        stored = memory_storage.get_contact_submission_by_id(target.id)
        assert stored.created_at == target.created_at

    def test_edit_ignores_read_only_fields(self, api_client, memory_storage, submissions):
        target = submissions[0]
        payload = {
            'name': 'Customer Zero',
            'email': 'zero@example.com',
            'service': 'Wiring',
            'message': 'Updated message',
            'addressed': True,
            'createdAt': '2000-01-01T00:00:00Z',
        }

        api_client.put(f'{BASE_URL}/submissions/{target.id}', payload, format='json')

        stored = memory_storage.get_contact_submission_by_id(target.id)
        assert stored.addressed is False
        assert stored.created_at == target.created_at
        assert stored.phone is None

    def test_edit_validation(self, api_client, submissions):
        response = api_client.put(
            f'{BASE_URL}/submissions/{submissions[0].id}',
            {'name': '', 'email': 'nope'},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error['field'] for error in response.data['errors']}
        assert fields == {'name', 'email', 'service', 'message'}

    def test_edit_missing_is_noop(self, api_client, memory_storage, submissions):
        payload = {
            'name': 'Ghost', 'email': 'ghost@example.com',
            'service': 'Wiring', 'message': 'Boo',
        }

        response = api_client.put(f'{BASE_URL}/submissions/{uuid.uuid4()}', payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert memory_storage.count_contact_submissions() == 3

    def test_delete_is_idempotent(self, api_client, memory_storage, submissions):
        url = f'{BASE_URL}/submissions/{submissions[0].id}'

        first = api_client.delete(url)
        second = api_client.delete(url)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_200_OK
        assert memory_storage.get_contact_submission_by_id(submissions[0].id) is None
        assert memory_storage.count_contact_submissions() == 2


class TestSubmissionAddressed:
    """POST /api/dashboard/submissions/:id/addressed"""

    def test_mark_addressed(self, api_client, memory_storage, submissions):
        url = f'{BASE_URL}/submissions/{submissions[2].id}/addressed'

        assert api_client.post(url).status_code == status.HTTP_200_OK
        assert api_client.post(url).status_code == status.HTTP_200_OK

        assert memory_storage.get_contact_submission_by_id(submissions[2].id).addressed is True
        assert memory_storage.get_contact_submission_by_id(submissions[1].id).addressed is False

    def test_mark_missing_is_noop(self, api_client, memory_storage):
        response = api_client.post(f'{BASE_URL}/submissions/{uuid.uuid4()}/addressed')

        assert response.status_code == status.HTTP_200_OK


class TestBulkActions:
    """POST /api/dashboard/submissions/bulk-*"""

    def test_bulk_delete(self, api_client, memory_storage, submissions):
        ids = [str(submissions[0].id), str(submissions[2].id), str(uuid.uuid4()), 'garbage']

        response = api_client.post(f'{BASE_URL}/submissions/bulk-delete', {'ids': ids}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True, 'count': 2}
        remaining = memory_storage.get_contact_submissions()
        assert [row.name for row in remaining] == ['Customer 1']

    def test_bulk_addressed(self, api_client, memory_storage, submissions):
        ids = [str(submissions[0].id), str(submissions[1].id)]

        response = api_client.post(f'{BASE_URL}/submissions/bulk-addressed', {'ids': ids}, format='json')

        assert response.data == {'success': True, 'count': 2}
        pending = memory_storage.get_contact_submissions(addressed=False)
        assert [row.name for row in pending] == ['Customer 2']

    @pytest.mark.parametrize('body', [{}, {'ids': []}])
    def test_bulk_requires_ids(self, api_client, memory_storage, body):
        response = api_client.post(f'{BASE_URL}/submissions/bulk-delete', body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['message'] == 'Select at least one submission.'


class TestClickList:
    """GET /api/dashboard/clicks"""

    def test_newest_first(self, api_client, clicks):
        response = api_client.get(f'{BASE_URL}/clicks')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert len(data) == 6
        assert data[0]['id'] == str(clicks[-1].id)
        assert data[-1]['id'] == str(clicks[0].id)
        assert set(data[0]) == {
            'id', 'buttonType', 'buttonLabel', 'clickedAt', 'ipAddress', 'userAgent', 'metadata'
        }

    def test_limit_and_type_filter(self, api_client, clicks):
        response = api_client.get(f'{BASE_URL}/clicks', {'limit': 2, 'buttonType': 'call'})

        data = response.data['data']
        assert [row['id'] for row in data] == [str(clicks[5].id), str(clicks[2].id)]


class TestDashboardStats:
    """GET /api/dashboard/stats"""

    def test_stats(self, api_client, submissions, clicks):
        response = api_client.get(f'{BASE_URL}/stats')

        assert response.status_code == status.HTTP_200_OK
        data = response.data['data']
        assert data['clickStats'] == [
            {'buttonType': 'call', 'buttonLabel': 'Call Now', 'count': 3},
            {'buttonType': 'whatsapp', 'buttonLabel': 'Chat on WhatsApp', 'count': 2},
            {'buttonType': 'email', 'buttonLabel': 'Email Us', 'count': 1},
        ]
        assert data['totalSubmissions'] == 3
        assert data['totalClicks'] == 6
        assert [row['name'] for row in data['recentSubmissions']] == [
            'Customer 2', 'Customer 1', 'Customer 0'
        ]
        assert data['recentClicks'][0]['id'] == str(clicks[-1].id)

    def test_stats_empty(self, api_client, memory_storage):
        response = api_client.get(f'{BASE_URL}/stats')

        assert response.data['data'] == {
            'clickStats': [],
            'totalSubmissions': 0,
            'totalClicks': 0,
            'recentSubmissions': [],
            'recentClicks': [],
        }

    def test_total_is_not_capped_by_recent(self, api_client, memory_storage):
        for index in range(12):
            memory_storage.create_contact_submission({
                'name': f'Lead {index}', 'email': f'lead{index}@example.com',
                'service': 'Wiring', 'message': 'Hi',
            })

        data = api_client.get(f'{BASE_URL}/stats').data['data']

        assert data['totalSubmissions'] == 12
        assert len(data['recentSubmissions']) == 10
        assert data['recentSubmissions'][0]['name'] == 'Lead 11'

    def test_stats_failure_returns_500(self, api_client, memory_storage, monkeypatch):
        def broken():
            raise RuntimeError('database unavailable')

        monkeypatch.setattr(memory_storage, 'get_button_click_stats', broken)

        response = api_client.get(f'{BASE_URL}/stats')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'success': False, 'message': 'Failed to fetch dashboard stats.'}
