"""
Token Service

Exchanges the configured client credentials for a GigaChat access token.
A fresh token is requested for every relayed message; nothing is cached.
"""

import logging
import time
from typing import Any, Optional

import httpx

from ..config import Settings
from ..errors import TokenAcquisitionError
from ..models.chat import TokenResponse
from ..utils.debug_logger import debug_logger

logger = logging.getLogger(__name__)


class TokenService:
    """OAuth2 client-credentials exchange against the GigaChat auth endpoint"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_headers(self) -> dict:
        """Headers for the token request. The secret is used as-is, not re-encoded."""
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "Accept": "application/json",
            "RqUID": self.settings.client_id,
            "Authorization": f"Basic {self.settings.client_secret}",
        }

    async def get_access_token(self, client: httpx.AsyncClient, request_id: str = "", request: Optional[Any] = None) -> str:
        """
        Request a new access token

        Args:
            client: HTTP client trusting the GigaChat CA
            request_id: Request identifier for tracing
            request: Optional FastAPI request object for timing

        Returns:
            The access_token value from the auth response

        Raises:
            TokenAcquisitionError: on transport errors, non-2xx responses or
                a response without an access token
        """
        debug_logger.log_token(request_id, f"Requesting access token from {self.settings.auth_url}", request)
        start = time.perf_counter()

        try:
            response = await client.post(
                self.settings.auth_url,
                data={"scope": self.settings.scope},
                headers=self.build_headers(),
            )
            response.raise_for_status()
            token = TokenResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            body = e.response.text
            logger.error(f"Error obtaining access token: {body or e}")
            raise TokenAcquisitionError(
                f"Auth endpoint returned {e.response.status_code}",
                status_code=e.response.status_code,
                body=body,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error obtaining access token: {e}")
            raise TokenAcquisitionError(str(e)) from e

        debug_logger.log_timing(request_id, "Token request", (time.perf_counter() - start) * 1000)
        return token.access_token
