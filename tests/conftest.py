import pytest
from unittest.mock import AsyncMock

from use_api.clients import http_client
from use_api.core.config import get_settings

MOCK_RESPONSE = {"data": "here"}


class FakeResponse:
    """Stand-in for a fetch response envelope."""

    def __init__(self, status_code=200, ok=True, body=None):
        self.status_code = status_code
        self.ok = ok
        self.json = AsyncMock(return_value=MOCK_RESPONSE if body is None else body)


def make_transport(status_code=200, ok=True, body=None):
    """Return an AsyncMock transport answering every call with one envelope."""
    response = FakeResponse(status_code=status_code, ok=ok, body=body)
    transport = AsyncMock(return_value=response)
    transport.response = response
    return transport


@pytest.fixture
def transport():
    return make_transport()


@pytest.fixture
def transport_factory():
    return make_transport


@pytest.fixture(autouse=True)
def reset_globals():
    """Give every test a fresh settings cache and no default transport."""
    get_settings.cache_clear()
    http_client.set_default_transport(None)
    yield
    http_client.set_default_transport(None)
    get_settings.cache_clear()
