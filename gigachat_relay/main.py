"""
GigaChat Relay FastAPI Application

This is the main FastAPI application entry point.
It builds the app from validated configuration, adds middleware and routes.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import RelayConfig, get_settings
from .middleware.timing import TimingMiddleware
from .services import RelayService, TokenService
from .utils.debug_logger import debug_logger
from .utils.http import HttpClientFactory
from .web.routes import router

logger = logging.getLogger(__name__)


def create_app(config: Optional[RelayConfig] = None, http_client_factory: Optional[HttpClientFactory] = None) -> FastAPI:
    """
    Create the relay application

    Args:
        config: Validated configuration. Loaded from the environment when omitted.
        http_client_factory: Outbound client factory. Built from config when omitted.

    Raises:
        ConfigurationError: configuration is incomplete or the CA is unusable
    """
    config = config or get_settings()
    settings = config.settings

    if settings.debug:
        debug_logger.debug_enabled = True

    client_factory = http_client_factory or HttpClientFactory(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Server started at http://localhost:{settings.port}")
        yield

    app = FastAPI(
        title="GigaChat Relay",
        version=__version__,
        description="Relays chat messages to the GigaChat API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relay_service = RelayService(settings, TokenService(settings), client_factory)

    app.add_middleware(TimingMiddleware)
    app.include_router(router)
    return app
