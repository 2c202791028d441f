"""
Services layer for GigaChat Relay

This module contains the services that talk to the GigaChat API.
"""

from .token_service import TokenService
from .relay_service import RelayService

__all__ = [
    "TokenService",
    "RelayService",
]
