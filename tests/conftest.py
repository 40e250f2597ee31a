import pytest
from django.apps import apps
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.core.container import build_container

ADMIN_CREDENTIALS = {"email": "admin@sweetshop.com", "password": "admin123"}
USER_CREDENTIALS = {"email": "user@sweetshop.com", "password": "user123"}


@pytest.fixture(autouse=True)
def _fast_hashers(settings):
    """Swap PBKDF2 for a fast hasher; hashing speed is irrelevant here."""
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture(autouse=True)
def _clear_throttle_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def container(_fast_hashers, monkeypatch):
    """A fresh, isolated container installed behind the HTTP views."""
    fresh = build_container(seed_catalog=True)
    monkeypatch.setattr(apps.get_app_config("core"), "container", fresh)
    return fresh


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


def _token_for(container, credentials) -> str:
    account = container.directory.authenticate(credentials)
    return container.sessions.issue(account.id).token


@pytest.fixture()
def admin_token(container) -> str:
    return _token_for(container, ADMIN_CREDENTIALS)


@pytest.fixture()
def user_token(container) -> str:
    return _token_for(container, USER_CREDENTIALS)


@pytest.fixture()
def admin_client(admin_token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {admin_token}")
    return client


@pytest.fixture()
def user_client(user_token):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {user_token}")
    return client
