#!/usr/bin/env python3
"""Start the Banter API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from banter.config import Settings
from banter.util.observability import configure_logfire


def main() -> int:
    settings = Settings()

    # Configured before the app is imported so import-time failures are captured
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Banter API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "banter.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=settings.environment not in ("test", "development"),
        )
        return 0

    except Exception as e:
        logfire.error(
            "Banter API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
