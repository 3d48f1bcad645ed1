"""Pytest configuration and fixtures."""

import os

import pytest

from salesforce_auth.client import OAuth2Client
from salesforce_auth.config import ClientSettings, ProviderConfig
from salesforce_auth.salesforce import SalesforceProvider
from salesforce_auth.transport import TransportResponse

os.environ.setdefault("SESSION_SECRET", "test-secret")

IDENTITY_URL = "https://login.salesforce.com/id/00Dx0000000BV7z/005x00000012Q9P"


class FakeTransport:
    """HttpTransport that records requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    async def request(self, method, url, headers=None, data=None):
        self.requests.append({"method": method, "url": url, "headers": headers, "data": data})
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response


@pytest.fixture
def token_body():
    """Token endpoint success body as Salesforce returns it."""
    return {
        "access_token": "00Dx0000000BV7z!AR8AQP0jITN80ESEsj5EbaZTFG0R",
        "refresh_token": "5Aep861KIwKdekr90I4iHdtDgWwRoG7O",
        "instance_url": "https://yourInstance.salesforce.com",
        "id": IDENTITY_URL,
        "issued_at": "1278448832702",
        "signature": "0CmxinZir53Yex7nE0TD+zMpvIWYGb/bdJh6XfOH6EQ=",
        "scope": "id api refresh_token",
        "token_type": "Bearer",
    }


@pytest.fixture
def identity_body():
    """Identity URL response body."""
    return {
        "id": IDENTITY_URL,
        "user_id": "005x00000012Q9P",
        "organization_id": "00Dx0000000BV7z",
        "username": "jane@example.com",
        "nick_name": "jane",
        "display_name": "Jane Doe",
        "email": "jane@example.com",
        "email_verified": True,
        "first_name": "Jane",
        "last_name": "Doe",
        "timezone": "Europe/Berlin",
        "active": True,
        "user_type": "STANDARD",
        "language": "en_US",
        "locale": "en_US",
        "photos": {"picture": "https://example.com/picture"},
        "urls": {"rest": "https://yourInstance.salesforce.com/services/data/v{version}/"},
    }


@pytest.fixture
def provider():
    return SalesforceProvider(ProviderConfig())


@pytest.fixture
def settings():
    return ClientSettings(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="https://app.test/auth/callback",
    )


@pytest.fixture
def fake_transport():
    """The FakeTransport class, for tests that build their own client."""
    return FakeTransport


@pytest.fixture
def make_client(provider, settings):
    """Factory for an OAuth2Client whose transport replays the given responses."""

    def _make(*responses):
        transport = FakeTransport(*responses)
        return OAuth2Client(provider, settings, transport), transport

    return _make


@pytest.fixture
def ok():
    """Build a 200 TransportResponse."""

    def _ok(body):
        return TransportResponse(status_code=200, body=body, reason_phrase="OK")

    return _ok
