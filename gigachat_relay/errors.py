"""
Error types for GigaChat Relay
"""

from typing import Optional


class RelayError(Exception):
    """Base class for relay errors"""


class ConfigurationError(RelayError):
    """Required configuration is missing or unusable. Fatal at startup."""


class UpstreamError(RelayError):
    """An outbound call to GigaChat failed"""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class TokenAcquisitionError(UpstreamError):
    """The OAuth client-credentials exchange failed"""


class ChatRelayError(UpstreamError):
    """The chat-completion call failed"""
