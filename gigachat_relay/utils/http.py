"""
Outbound HTTP client construction

Both GigaChat endpoints are served with certificates issued by the Russian
Trusted Root CA, so every client trusts the bundled CA certificate.
"""

import ssl
from typing import Optional

import httpx

from ..config import RelayConfig
from ..errors import ConfigurationError


def build_ssl_context(ca_cert: bytes, extend_system_trust: bool = False) -> ssl.SSLContext:
    """
    Build an SSL context trusting the given PEM CA certificate(s).

    Args:
        ca_cert: PEM-encoded certificate bytes
        extend_system_trust: keep the platform trust store and add the CA to it.
            When False only the given CA is trusted.

    Returns:
        Configured SSL context
    """
    cadata = ca_cert.decode("ascii", errors="replace")
    try:
        if extend_system_trust:
            context = ssl.create_default_context()
            context.load_verify_locations(cadata=cadata)
        else:
            context = ssl.create_default_context(cadata=cadata)
    except (ssl.SSLError, ValueError) as e:
        raise ConfigurationError(f"Invalid CA certificate: {e}") from e
    return context


class HttpClientFactory:
    """Creates per-request async clients sharing one SSL context"""

    def __init__(self, config: RelayConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = config.settings.request_timeout
        self.transport = transport
        # Injected transports do their own I/O, no TLS needed
        if transport is None:
            self.verify = build_ssl_context(config.ca_cert, config.settings.ca_extend_system_trust)
        else:
            self.verify = True

    def __call__(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self.verify,
            timeout=self.timeout,
            transport=self.transport,
        )
