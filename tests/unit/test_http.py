"""
Unit tests for outbound client construction.
"""

import ssl
from pathlib import Path

import httpx
import pytest

from gigachat_relay.errors import ConfigurationError
from gigachat_relay.utils.http import HttpClientFactory, build_ssl_context

pytestmark = pytest.mark.unit

TEST_CA_PEM = (Path(__file__).parent.parent / "fixtures" / "test_ca.pem").read_bytes()


@pytest.mark.parametrize("extend_system_trust", [False, True])
def test_invalid_ca_raises_configuration_error(extend_system_trust):
    with pytest.raises(ConfigurationError):
        build_ssl_context(b"not a certificate", extend_system_trust)


def test_bundled_ca_replaces_system_trust():
    context = build_ssl_context(TEST_CA_PEM)

    ca_der = ssl.PEM_cert_to_DER_cert(TEST_CA_PEM.decode("ascii"))
    assert context.get_ca_certs(binary_form=True) == [ca_der]
    assert context.verify_mode == ssl.CERT_REQUIRED
    assert context.check_hostname is True


def test_bundled_ca_extends_system_trust():
    system_certs = ssl.create_default_context().get_ca_certs(binary_form=True)

    context = build_ssl_context(TEST_CA_PEM, extend_system_trust=True)

    ca_der = ssl.PEM_cert_to_DER_cert(TEST_CA_PEM.decode("ascii"))
    trusted = context.get_ca_certs(binary_form=True)
    assert ca_der in trusted
    assert len(trusted) == len(system_certs) + 1
    assert all(cert in trusted for cert in system_certs)


def test_factory_builds_context_from_config(relay_config):
    config = relay_config._replace(ca_cert=TEST_CA_PEM)

    factory = HttpClientFactory(config)

    assert isinstance(factory.verify, ssl.SSLContext)
    assert len(factory.verify.get_ca_certs()) == 1


def test_factory_with_transport_skips_tls(relay_config):
    transport = httpx.MockTransport(lambda request: httpx.Response(200))

    factory = HttpClientFactory(relay_config, transport=transport)

    assert factory.verify is True
    assert factory.timeout is None


def test_factory_without_transport_builds_ssl_context(relay_config, monkeypatch):
    sentinel = object()
    monkeypatch.setattr("gigachat_relay.utils.http.build_ssl_context", lambda ca, extend: sentinel)

    factory = HttpClientFactory(relay_config)

    assert factory.verify is sentinel


@pytest.mark.asyncio
async def test_factory_returns_fresh_clients(client_factory):
    async with client_factory() as first, client_factory() as second:
        assert isinstance(first, httpx.AsyncClient)
        assert first is not second
