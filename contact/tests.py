"""
Tests for the public contact form: validation, storage, notification email.
"""
import pytest
from django.core import mail
from rest_framework import status
from rest_framework.exceptions import ValidationError

from contact.notifications import ContactNotificationService
from contact.serializers import validate_contact_form
from contact.tasks import send_contact_notification
from contact.views import ContactFormSubmitView

CONTACT_URL = '/api/contact'


def error_fields(response):
    return {error['field']: error['message'] for error in response.data['errors']}


class TestContactFormValidation:
    """validate_contact_form() rules"""

    def test_valid_payload(self, contact_payload):
        data = validate_contact_form(contact_payload)

        assert data['name'] == 'Jane Doe'
        assert data['phone'] == '+91 98765 43210'

    def test_phone_is_optional(self, contact_payload):
        del contact_payload['phone']
        assert validate_contact_form(contact_payload)['phone'] is None

    def test_blank_phone_becomes_null(self, contact_payload):
        contact_payload['phone'] = '   '
        assert validate_contact_form(contact_payload)['phone'] is None

    def test_all_failures_reported(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_contact_form({})

        detail = excinfo.value.detail
        assert set(detail) == {'name', 'email', 'service', 'message'}
        assert str(detail['name'][0]) == 'Name is required'
        assert str(detail['email'][0]) == 'Valid email is required'
        assert str(detail['service'][0]) == 'Service selection is required'
        assert str(detail['message'][0]) == 'Message is required'

    def test_malformed_email_rejected(self, contact_payload):
        contact_payload['email'] = 'not-an-email'
        with pytest.raises(ValidationError) as excinfo:
            validate_contact_form(contact_payload)

        assert str(excinfo.value.detail['email'][0]) == 'Valid email is required'

    def test_empty_strings_rejected(self, contact_payload):
        contact_payload['name'] = ''
        contact_payload['message'] = ''
        with pytest.raises(ValidationError) as excinfo:
            validate_contact_form(contact_payload)

        assert set(excinfo.value.detail) == {'name', 'message'}


class TestContactFormSubmit:
    """POST /api/contact"""

    def test_submit_stores_submission(self, api_client, memory_storage, contact_payload):
        response = api_client.post(
            CONTACT_URL, contact_payload, format='json',
            HTTP_USER_AGENT='pytest-browser', REMOTE_ADDR='203.0.113.7'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert response.data['message'] == 'Thank you! Your message has been sent successfully.'

        submission = memory_storage.get_contact_submission_by_id(response.data['submissionId'])
        assert submission is not None
        assert submission.name == 'Jane Doe'
        assert submission.addressed is False
        assert submission.user_agent == 'pytest-browser'
        assert submission.ip == '203.0.113.7'

    def test_forwarded_for_header_wins(self, api_client, memory_storage, contact_payload):
        response = api_client.post(
            CONTACT_URL, contact_payload, format='json',
            HTTP_X_FORWARDED_FOR='198.51.100.20, 10.0.0.1'
        )

        submission = memory_storage.get_contact_submission_by_id(response.data['submissionId'])
        assert submission.ip == '198.51.100.20'

    def test_invalid_submission_returns_400(self, api_client, memory_storage):
        response = api_client.post(
            CONTACT_URL, {'name': 'Jane', 'email': 'bad'}, format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['success'] is False
        assert response.data['message'] == 'Please fill in all required fields correctly.'
        fields = error_fields(response)
        assert fields['email'] == 'Valid email is required'
        assert 'service' in fields
        assert 'message' in fields
        assert memory_storage.count_contact_submissions() == 0

    def test_storage_failure_returns_500(self, api_client, memory_storage, contact_payload, monkeypatch):
        def broken(data):
            raise RuntimeError('database unavailable')

        monkeypatch.setattr(memory_storage, 'create_contact_submission', broken)

        response = api_client.post(CONTACT_URL, contact_payload, format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {
            'success': False,
            'message': 'An error occurred. Please try again.',
        }

    def test_notification_not_queued_when_disabled(
        self, api_client, memory_storage, contact_payload, settings, monkeypatch
    ):
        settings.CONTACT_EMAIL_NOTIFICATIONS = False
        queued = []
        monkeypatch.setattr('contact.views.send_contact_notification.delay', queued.append)

        api_client.post(CONTACT_URL, contact_payload, format='json')

        assert queued == []

    def test_notification_queued_when_enabled(
        self, api_client, memory_storage, contact_payload, settings, monkeypatch
    ):
        settings.CONTACT_EMAIL_NOTIFICATIONS = True
        queued = []
        monkeypatch.setattr('contact.views.send_contact_notification.delay', queued.append)

        response = api_client.post(CONTACT_URL, contact_payload, format='json')

        assert queued == [response.data['submissionId']]

    def test_queue_failure_does_not_fail_request(
        self, api_client, memory_storage, contact_payload, settings, monkeypatch
    ):
        settings.CONTACT_EMAIL_NOTIFICATIONS = True

        def broker_down(submission_id):
            raise ConnectionError('broker unavailable')

        monkeypatch.setattr('contact.views.send_contact_notification.delay', broker_down)

        response = api_client.post(CONTACT_URL, contact_payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert memory_storage.count_contact_submissions() == 1

    def test_injected_storage(self, contact_payload):
        from rest_framework.test import APIRequestFactory
        from core.storage import InMemoryStorage

        storage = InMemoryStorage()
        view = ContactFormSubmitView.as_view(storage=storage)
        request = APIRequestFactory().post(CONTACT_URL, contact_payload, format='json')

        response = view(request)

        assert response.status_code == status.HTTP_200_OK
        assert storage.count_contact_submissions() == 1


class TestContactNotificationService:
    """ContactNotificationService email rendering and delivery"""

    def test_send_contact_email(self, contact_payload, settings):
        settings.CONTACT_EMAIL_TO = 'owner@example.com'
        settings.CONTACT_EMAIL_FROM = 'noreply@example.com'

        assert ContactNotificationService().send_contact_email(contact_payload) is True

        assert len(mail.outbox) == 1
        email = mail.outbox[0]
        assert email.subject == 'New Contact Form Submission - Wiring'
        assert email.to == ['owner@example.com']
        assert email.from_email == 'noreply@example.com'
        assert email.reply_to == ['jane@example.com']
        assert 'Phone: +91 98765 43210' in email.body
        html, mimetype = email.alternatives[0]
        assert mimetype == 'text/html'
        assert 'Jane Doe' in html

    def test_phone_line_omitted_without_phone(self, contact_payload):
        contact_payload['phone'] = None
        service = ContactNotificationService()

        assert 'Phone:' not in service.build_text(contact_payload)
        assert 'Phone:' not in service.build_html(contact_payload)

    def test_html_is_escaped(self, contact_payload):
        contact_payload['message'] = '<script>alert(1)</script>'
        html = ContactNotificationService().build_html(contact_payload)

        assert '<script>' not in html
        assert '&lt;script&gt;' in html

    def test_provider_failure_returns_false(self, contact_payload, monkeypatch):
        def reject(self, fail_silently=False):
            raise OSError('SMTP connection refused')

        monkeypatch.setattr('django.core.mail.EmailMultiAlternatives.send', reject)

        assert ContactNotificationService().send_contact_email(contact_payload) is False

    def test_missing_recipient_returns_false(self, contact_payload, settings):
        settings.CONTACT_EMAIL_TO = ''

        assert ContactNotificationService().send_contact_email(contact_payload) is False
        assert len(mail.outbox) == 0


class TestSendContactNotificationTask:
    """send_contact_notification task"""

    def test_sends_email_for_stored_submission(self, memory_storage, contact_payload, settings):
        settings.CONTACT_EMAIL_TO = 'owner@example.com'
        submission = memory_storage.create_contact_submission(contact_payload)

        assert send_contact_notification(str(submission.id)) is True
        assert len(mail.outbox) == 1
        assert 'Jane Doe' in mail.outbox[0].body

    def test_missing_submission_is_skipped(self, memory_storage):
        assert send_contact_notification('00000000-0000-0000-0000-000000000000') is False
        assert len(mail.outbox) == 0
