from unittest.mock import MagicMock

import pytest

from bloodportal import create_app
from bloodportal.config import TestingConfig
from bloodportal.services.api_client import BackendClient


@pytest.fixture
def backend():
    """Stands in for the external backend; every call succeeds unless told otherwise"""
    client = MagicMock(spec=BackendClient)
    client.fetch_requests.return_value = []
    client.create_request.return_value = {'ok': True}
    client.register_donor.return_value = {'ok': True}
    client.send_contact.return_value = {'ok': True}
    client.fetch_hospitals.return_value = []
    return client


@pytest.fixture
def app(backend):
    return create_app(TestingConfig, client=backend)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def feed(app):
    return app.extensions['request_feed']
