#!/usr/bin/env python3
"""Start the gallery API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from gallery.config import Settings
from gallery.util.logging import setup_logging
from gallery.util.observability import configure_logfire, instrument_httpx


def main() -> int:
    settings = Settings()

    # Logging and Logfire must be ready before the app module is imported
    setup_logging(settings)
    configure_logfire(settings)
    instrument_httpx()

    try:
        logfire.info(
            "Starting gallery API",
            environment=settings.environment,
            port=settings.port,
        )
        uvicorn.run(
            "gallery.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
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
