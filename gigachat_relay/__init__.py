"""
GigaChat Relay

A small FastAPI service that exchanges client credentials for a GigaChat
access token and forwards a single chat message to the chat-completion API.
"""

__version__ = "0.1.0"
