"""
Relay Service

Handles one chat message end-to-end: fetch a token, forward the message to
the chat-completion endpoint and hand back the upstream JSON bytes untouched.
"""

import json
import logging
import time
from typing import Any, Optional

import httpx

from ..config import Settings
from ..errors import ChatRelayError
from ..models.chat import ChatCompletionRequest, ChatRequest
from ..utils.debug_logger import debug_logger
from ..utils.http import HttpClientFactory
from .token_service import TokenService

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant {name} in chat response")


class RelayService:
    """Service forwarding chat messages to GigaChat"""

    def __init__(self, settings: Settings, token_service: TokenService, client_factory: HttpClientFactory):
        self.settings = settings
        self.token_service = token_service
        self.client_factory = client_factory

    async def relay_chat(self, chat_request: ChatRequest, request_id: str = "", request: Optional[Any] = None) -> bytes:
        """
        Relay a chat message to GigaChat

        Args:
            chat_request: Inbound chat request
            request_id: Request identifier for tracing
            request: Optional FastAPI request object for timing

        Returns:
            Raw JSON body of the chat-completion response

        Raises:
            TokenAcquisitionError: the token exchange failed
            ChatRelayError: the chat-completion call failed
        """
        async with self.client_factory() as client:
            token = await self.token_service.get_access_token(client, request_id, request)

            if not self.settings.chat_url:
                logger.error("GIGACHAT_API_URL not set")
                raise ChatRelayError("GIGACHAT_API_URL not set")

            payload = ChatCompletionRequest.for_user_message(chat_request).to_payload()
            debug_logger.log_relay(request_id, f"Forwarding message to {self.settings.chat_url}", request)
            start = time.perf_counter()

            try:
                response = await client.post(
                    self.settings.chat_url,
                    json=payload,
                    headers={
                        "Content-Type": "application/json",
                        "Accept": "application/json",
                        "Authorization": f"Bearer {token}",
                    },
                )
                response.raise_for_status()
                body = response.content
                # Must be strict JSON, it is passed on as-is
                json.loads(body, parse_constant=_reject_constant)
            except httpx.HTTPStatusError as e:
                logger.error(f"Chat completion failed: {e}: {e.response.text}", exc_info=True)
                raise ChatRelayError(
                    f"Chat endpoint returned {e.response.status_code}",
                    status_code=e.response.status_code,
                    body=e.response.text,
                ) from e
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Chat completion failed: {e}", exc_info=True)
                raise ChatRelayError(str(e)) from e

        debug_logger.log_timing(request_id, "Chat completion", (time.perf_counter() - start) * 1000)
        return body
