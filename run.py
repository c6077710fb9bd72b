"""Entry point for the Student Records API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``); see
``student_records_api.app.core.config`` for the other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from student_records_api.app.core.config import settings
from student_records_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("API running at http://localhost:%s", settings.port)
    logger.info("Swagger docs at http://localhost:%s%s", settings.port, settings.docs_url)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
