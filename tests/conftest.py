"""
Pytest configuration and shared fixtures for GigaChat Relay tests.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from gigachat_relay.config import AUTH_URL, RelayConfig, Settings
from gigachat_relay.main import create_app
from gigachat_relay.utils.http import HttpClientFactory

CHAT_URL = "https://gigachat.example.test/api/v1/chat/completions"
CLIENT_ID = "6f0b1291-c7f3-43c6-bb2e-9f3efb2dc98e"
CLIENT_SECRET = "Y2xpZW50LWlkOmNsaWVudC1zZWNyZXQ="

CHAT_BODY = {
    "choices": [
        {
            "message": {"role": "assistant", "content": "Привет! Чем могу помочь?"},
            "index": 0,
            "finish_reason": "stop",
        }
    ],
    "created": 1706000000,
    "model": "GigaChat:1.0.26.20",
    "object": "chat.completion",
    "usage": {"prompt_tokens": 10, "completion_tokens": 8, "total_tokens": 18},
}


class UpstreamStub:
    """Fake auth and chat endpoints recording every outbound request"""

    def __init__(self):
        self.requests = []
        self.auth_status = 200
        self.auth_json = {"access_token": "T", "expires_at": 1706001800000}
        self.chat_status = 200
        self.chat_json = CHAT_BODY
        self.chat_text = None
        self.auth_error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url == httpx.URL(AUTH_URL):
            if self.auth_error is not None:
                raise self.auth_error
            return httpx.Response(self.auth_status, json=self.auth_json)
        if request.url == httpx.URL(CHAT_URL):
            if self.chat_text is not None:
                return httpx.Response(self.chat_status, text=self.chat_text)
            return httpx.Response(self.chat_status, json=self.chat_json)
        return httpx.Response(404, text="unexpected url")

    def requests_to(self, url: str):
        return [r for r in self.requests if r.url == httpx.URL(url)]


@pytest.fixture
def test_settings(tmp_path):
    """Create settings pointing at the fake chat endpoint."""
    ca_path = tmp_path / "russiantrustedca.pem"
    ca_path.write_bytes(b"-----BEGIN CERTIFICATE-----\nTEST\n-----END CERTIFICATE-----\n")
    return Settings(
        chat_url=CHAT_URL,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        ca_cert_path=ca_path,
        debug=False,
    )


@pytest.fixture
def relay_config(test_settings):
    return RelayConfig(settings=test_settings, ca_cert=test_settings.ca_cert_path.read_bytes())


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def client_factory(relay_config, upstream):
    return HttpClientFactory(relay_config, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(relay_config, client_factory):
    """Test client for the relay app wired to the fake upstream."""
    return TestClient(create_app(relay_config, client_factory))
