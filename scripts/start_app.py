#!/usr/bin/env python3
"""Start the StackIt API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from stackit.config import Settings
from stackit.util.logging import setup_logging
from stackit.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure logging before anything can fail
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting StackIt API", port=settings.api.port)

        uvicorn.run(
            "stackit.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.api.port,
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
        raise


if __name__ == "__main__":
    sys.exit(main())
