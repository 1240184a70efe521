import pytest
from fastapi.testclient import TestClient

from contacts_api.app.core.config import Settings
from contacts_api.app.main import create_app
from contacts_api.app.services.contact_service import ContactService, default_contacts


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(settings):
    # Fresh app, and therefore a fresh registry with the two seed contacts.
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def service():
    return ContactService(default_contacts())
