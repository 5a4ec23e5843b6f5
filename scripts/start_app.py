#!/usr/bin/env python3
"""Run the pingtag API server.

Logging and Logfire are configured before the app module is imported, so
failures while loading the tag document are reported too.
"""

import sys

import logfire
import uvicorn

from pingtag.config import Settings
from pingtag.util.logging import setup_logging
from pingtag.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting pingtag",
        host=settings.host,
        port=settings.port,
        storage_path=settings.storage.path,
    )
    try:
        # lifespan="on" turns a startup failure (e.g. a corrupt tag
        # document) into a non-zero exit instead of a half-started server
        uvicorn.run(
            "pingtag.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            lifespan="on",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "pingtag failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
