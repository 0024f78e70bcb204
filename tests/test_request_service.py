import requests
import pytest

from cartodb_tiles.services.request_service import RequestService
from cartodb_tiles.exceptions.cartodb_exceptions import (
    RemoteRejectedError, RemoteUnavailableError, TransportError, UnexpectedResponseError
)

URL = "https://user.cartodb.com/api/v1/map/named/foo"


def test_ok_returns_decoded_json(maps_api, request_service):
    maps_api.route('POST', URL, 200, {'layergroupid': 'abc123'})

    status_code, body = request_service.execute('post', URL, {'api_key': 'k'}, {})

    assert status_code == 200
    assert body == {'layergroupid': 'abc123'}
    call = maps_api.calls[0]
    assert call['method'] == 'POST'
    assert call['params'] == {'api_key': 'k'}
    assert call['json'] == {}
    assert call['timeout'] == 5


def test_ok_non_json_body_is_returned_as_text(maps_api, request_service):
    maps_api.route('GET', URL, 200, text='plain text')

    assert request_service.execute('GET', URL) == (200, 'plain text')


def test_empty_body_is_none(maps_api, request_service):
    maps_api.route('PUT', URL, 200)

    assert request_service.execute('PUT', URL, None, {'name': 'foo'}) == (200, None)


@pytest.mark.parametrize('status_code', [400, 401, 403, 404, 499])
def test_client_errors_are_rejected(maps_api, request_service, status_code):
    maps_api.route('PUT', URL, status_code, {'errors': ['nope']})

    with pytest.raises(RemoteRejectedError) as excinfo:
        request_service.execute('PUT', URL, {'api_key': 'k'}, {'name': 'foo'})

    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == {'errors': ['nope']}


@pytest.mark.parametrize('status_code', [500, 502, 503])
def test_server_errors_are_unavailable(maps_api, request_service, status_code):
    maps_api.route('POST', URL, status_code, text='boom')

    with pytest.raises(RemoteUnavailableError) as excinfo:
        request_service.execute('POST', URL, {'api_key': 'k'}, {})

    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == 'boom'


@pytest.mark.parametrize('status_code', [201, 204, 302, 304])
def test_other_statuses_are_unexpected(maps_api, request_service, status_code):
    maps_api.route('POST', URL, status_code, {'ok': True})

    with pytest.raises(UnexpectedResponseError) as excinfo:
        request_service.execute('POST', URL, {'api_key': 'k'}, {})

    assert excinfo.value.status_code == status_code


def test_transport_failure_propagates(maps_api, request_service):
    cause = requests.ConnectionError("connection refused")
    maps_api.route('POST', URL, error=cause)

    with pytest.raises(TransportError) as excinfo:
        request_service.execute('POST', URL, {'api_key': 'k'}, {})

    assert excinfo.value.__cause__ is cause
    assert excinfo.value.method == 'POST'
    assert excinfo.value.uri == URL


def test_timeout_is_a_transport_failure(maps_api, request_service):
    maps_api.route('PUT', URL, error=requests.Timeout("read timed out"))

    with pytest.raises(TransportError):
        request_service.execute('PUT', URL, {'api_key': 'k'}, {'name': 'foo'})


def test_session_is_closed_after_each_call(maps_api):
    sessions = []

    def create_session_override():
        session = maps_api.session()
        sessions.append(session)
        return session

    service = RequestService()
    service.create_session = create_session_override  # type: ignore
    maps_api.route('POST', URL, 200, {'layergroupid': 'a'})

    service.execute('POST', URL)
    service.execute('POST', URL)

    assert len(sessions) == 2
    assert all(s.closed for s in sessions)


def test_create_session_has_no_retries():
    session = RequestService().create_session()
    try:
        adapter = session.get_adapter('https://user.cartodb.com/')
        assert adapter.max_retries.total == 0
    finally:
        session.close()
