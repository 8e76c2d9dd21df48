from unittest.mock import MagicMock

import pytest
import requests

from bloodportal.errors import ApiError, HTTPError, NetworkError
from bloodportal.models.chat_message_model import ChatMessage
from bloodportal.models.donor_model import Donor
from bloodportal.services.api_client import BackendClient
from tests.factories import make_request, make_row


def _response(status_code=200, json_body=None, text=None, reason='OK'):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    if text is None:
        text = '' if json_body is None else 'json'
    response.text = text
    response.content = text.encode()
    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return BackendClient('http://backend.test/', session=session)


def test_sets_json_content_type(session):
    BackendClient('http://backend.test', session=session)
    session.headers.update.assert_called_once_with({'Content-Type': 'application/json'})


def test_fetch_requests_calls_get(client, session):
    rows = [make_row(patient_name='A')]
    session.request.return_value = _response(json_body=rows)

    assert client.fetch_requests() == rows
    session.request.assert_called_once_with('GET', 'http://backend.test/api/requests', json=None, timeout=None)


def test_fetch_requests_null_body_is_empty(client, session):
    session.request.return_value = _response(json_body=None)
    assert client.fetch_requests() == []


def test_fetch_requests_rejects_non_array(client, session):
    session.request.return_value = _response(json_body={'requests': []})
    with pytest.raises(ApiError):
        client.fetch_requests()


def test_non_2xx_is_http_error_with_body(client, session):
    session.request.return_value = _response(503, text='backend down', reason='Service Unavailable')
    with pytest.raises(HTTPError) as excinfo:
        client.fetch_requests()

    error = excinfo.value
    assert error.status_code == 503
    assert error.body == 'backend down'
    assert error.path == '/api/requests'
    assert str(error) == '503 Service Unavailable: backend down'


def test_connection_failure_is_network_error(client, session):
    session.request.side_effect = requests.ConnectionError('refused')
    with pytest.raises(NetworkError):
        client.fetch_requests()


def test_timeout_is_network_error(session):
    client = BackendClient('http://backend.test', timeout=2.5, session=session)
    session.request.side_effect = requests.Timeout('slow')
    with pytest.raises(NetworkError):
        client.fetch_requests()
    assert session.request.call_args[1]['timeout'] == 2.5


def test_invalid_json_is_api_error(client, session):
    session.request.return_value = _response(text='<html>', json_body=ValueError('no json'))
    with pytest.raises(ApiError) as excinfo:
        client.api_fetch('/api/requests')
    assert not isinstance(excinfo.value, (HTTPError, NetworkError))


def test_empty_ack_returns_none(client, session):
    session.request.return_value = _response(201, reason='Created')
    assert client.create_request(make_request()) is None


def test_create_request_posts_wire_payload(client, session):
    session.request.return_value = _response(201, json_body={'id': 42})
    blood_request = make_request(patient_name='Ali Khan')

    assert client.create_request(blood_request) == {'id': 42}
    session.request.assert_called_once_with(
        'POST', 'http://backend.test/api/requests', json=blood_request.to_dict(), timeout=None)


def test_register_donor_and_contact_paths(client, session):
    session.request.return_value = _response(json_body={'ok': True})
    client.register_donor(Donor('Bilal', 'O+'))
    client.send_contact(ChatMessage('hello', id=1))
    client.fetch_hospitals()

    calls = [(c[0][0], c[0][1]) for c in session.request.call_args_list]
    assert calls == [
        ('POST', 'http://backend.test/api/donors'),
        ('POST', 'http://backend.test/api/contact'),
        ('GET', 'http://backend.test/api/hospitals'),
    ]
    assert session.request.call_args_list[1][1]['json'] == {
        'id': 1, 'from': 'You', 'text': 'hello', 'at': session.request.call_args_list[1][1]['json']['at'],
    }


def test_from_config():
    client = BackendClient.from_config({'BACKEND_URL': 'http://api.example', 'BACKEND_TIMEOUT': 5})
    assert client.base_url == 'http://api.example'
    assert client.timeout == 5
    assert isinstance(client.session, requests.Session)
