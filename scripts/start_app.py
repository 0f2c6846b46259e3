#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from dojo.config import Settings
from dojo.util.error import ConfigurationError
from dojo.util.logging import setup_logging
from dojo.util.observability import configure_logfire


def check_settings(settings: Settings) -> None:
    """Refuse to start production with placeholder secrets.

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    if settings.environment == "production" and settings.uses_default_jwt_secret:
        raise ConfigurationError(
            "AUTH__JWT_SECRET must be set when ENVIRONMENT=production"
        )


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)

        logfire.info("Starting FastAPI application", git_sha=settings.git_sha)

        uvicorn.run(
            "dojo.interface.api.app:app",
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
