"""
Shared fixtures: an application bound to a throwaway SQLite store.
"""
import pytest
import requests

from app import create_app
from app.config import Config


@pytest.fixture
def app(tmp_path):
    class TestConfig(Config):
        TESTING = True
        DATABASE_URL = f"sqlite:///{tmp_path / 'users.db'}"
        API_PREFIX = '/api'
        CORS_ORIGINS = ['*']

    application = create_app(TestConfig)
    yield application
    application.extensions['database'].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def database(app):
    return app.extensions['database']


class FlaskResponse:
    """Just enough of ``requests.Response`` for the view model."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError("response body is not JSON")
        return data

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FlaskSession:
    """Routes the view model's HTTP calls through a Flask test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(('GET', url))
        return FlaskResponse(self.client.get(url))

    def post(self, url, json=None, timeout=None):
        self.calls.append(('POST', url, json))
        return FlaskResponse(self.client.post(url, json=json))


@pytest.fixture
def api_session(client):
    return FlaskSession(client)
