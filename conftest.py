"""
Shared pytest fixtures.
"""
import pytest
from django.apps import apps
from rest_framework.test import APIClient

from core.storage import DatabaseStorage, InMemoryStorage


@pytest.fixture
def api_client():
    """API client for making requests."""
    return APIClient()


@pytest.fixture
def memory_storage(monkeypatch):
    """
    Swap the application storage for a fresh in-memory instance.

    Views, tasks and management commands all resolve storage through the
    core app config, so this isolates a test from the database entirely.
    """
    storage = InMemoryStorage()
    monkeypatch.setattr(apps.get_app_config('core'), 'storage', storage)
    return storage


@pytest.fixture
def db_storage(transactional_db, monkeypatch):
    """
    Swap the application storage for the ORM-backed one.

    Uses a transactional database so rows committed by a request are visible
    to the stats worker threads.
    """
    storage = DatabaseStorage()
    monkeypatch.setattr(apps.get_app_config('core'), 'storage', storage)
    return storage


@pytest.fixture
def contact_payload():
    return {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'phone': '+91 98765 43210',
        'service': 'Wiring',
        'message': 'Need a quote for rewiring a 2BHK flat.',
    }
