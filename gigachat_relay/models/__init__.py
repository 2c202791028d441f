"""
Data models for GigaChat Relay

This module contains all Pydantic models for data validation and serialization.
"""

from .chat import ChatRequest, ChatMessage, ChatCompletionRequest, TokenResponse

__all__ = [
    "ChatRequest",
    "ChatMessage",
    "ChatCompletionRequest",
    "TokenResponse",
]
