#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import logging
import sys

import logfire
import pydantic
import uvicorn

from community.config import Settings
from community.util.error import ConfigurationError
from community.util.logging import setup_logging
from community.util.observability import configure_logfire

logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings, refusing to start without required configuration.

    Raises:
        ConfigurationError: If settings are missing or invalid (e.g. DATABASE__URL)
    """
    try:
        return Settings()
    except pydantic.ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Invalid configuration: {e}")
        raise ConfigurationError("Invalid configuration; is DATABASE__URL set?") from e


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = load_settings()

    setup_logging(settings)

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        logfire.info("Starting FastAPI application", port=settings.port)

        uvicorn.run(
            "community.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
