"""Entry point that serves the User Store API with Uvicorn.

Host, port and log level come from ``Settings`` (``HOST``, ``PORT`` and
``LOG_LEVEL`` environment variables).  The default listen address is
``0.0.0.0:3333``.

Usage:
    python -m user_store_api.run
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_store_api.app.core.config import settings
from user_store_api.app.core.logging_config import setup_logging
from user_store_api.app.main import app


logger = logging.getLogger(__name__)


async def serve() -> None:
    """Run the application until the server is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Starting server on %s:%d", settings.host, settings.port)
    try:
        asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
