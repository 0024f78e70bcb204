import json
import os
import sys

import pytest

# Add project src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from cartodb_tiles.models.settings import Settings
from cartodb_tiles.services.request_service import RequestService


class DummyResponse:
    def __init__(self, status_code: int, payload=None, text=None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.content = text.encode('utf-8')

    def json(self):
        return json.loads(self.text)


class DummySession:
    def __init__(self, api):
        self.api = api
        self.closed = False

    def request(self, method, url, params=None, json=None, timeout=None):
        return self.api.handle(method, url, params, json, timeout)

    def close(self):
        self.closed = True


class FakeMapsAPI:
    """Canned responses keyed by (method, url); unknown routes answer 404"""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def route(self, method, url, status_code=200, payload=None, text=None, error=None):
        self.routes[(method, url)] = error or DummyResponse(status_code, payload, text)

    def handle(self, method, url, params, body, timeout):
        self.calls.append({
            'method': method, 'url': url, 'params': params, 'json': body, 'timeout': timeout
        })
        response = self.routes.get((method, url), DummyResponse(404, {'errors': ['not found']}))
        if isinstance(response, Exception):
            raise response
        return response

    def session(self):
        return DummySession(self)

    def count(self, method, url):
        return sum(1 for c in self.calls if c['method'] == method and c['url'] == url)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ('CARTODB_USERNAME', 'CARTODB_API_KEY', 'CARTODB_HOSTNAME', 'CARTODB_TILES_CONFIG'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def maps_api():
    return FakeMapsAPI()


@pytest.fixture
def request_service(maps_api):
    service = RequestService(timeout=5)
    # Monkeypatch instance method
    service.create_session = maps_api.session  # type: ignore
    return service


@pytest.fixture
def settings():
    return Settings()
