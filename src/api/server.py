"""
Server bootstrap - Runs the API under uvicorn.

uvicorn installs the SIGINT/SIGTERM handlers: on either signal it stops
accepting connections, waits up to ``shutdown_timeout_seconds`` for
in-flight requests, then closes them and runs lifespan shutdown.
"""

import logging

import uvicorn

from src.config.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the application until signalled."""
    settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Server starting on %s:%s", settings.http_host, settings.http_port)

    uvicorn.run(
        "src.api.main:app",
        host=settings.http_host,
        port=settings.http_port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )

    logger.info("Server shutdown complete")


if __name__ == "__main__":
    main()
