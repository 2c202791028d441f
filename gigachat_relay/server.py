"""
Process entry point: validate configuration, then serve on port 3000
"""

import logging
import os
import sys

import uvicorn

from .config import get_settings
from .errors import ConfigurationError
from .main import create_app

logger = logging.getLogger(__name__)


def run() -> None:
    debug = os.getenv("DEBUG_LOGGING", "false").lower() == "true"
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)

    try:
        config = get_settings()
        app = create_app(config)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    settings = config.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
