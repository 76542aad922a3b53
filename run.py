"""Entry point for the Todo API server.

Serves ``todo_api.app.main:app`` with uvicorn on ``HOST:PORT`` (defaults
``0.0.0.0:5050``).  Configuration such as ``MONGODB_URI`` may be placed
in a ``.env`` file in the working directory when ``ENV`` is not
``production``.

uvicorn stops the server once on SIGINT or SIGTERM; the application
lifespan then closes the database connection.  If the application
cannot start (for example because MongoDB is unreachable) the process
exits with status 1.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from todo_api.app.core.config import settings
from todo_api.app.core.logging_config import setup_logging
from todo_api.app.main import app


async def serve() -> bool:
    """Run the server until it is asked to stop.

    Returns whether the application started successfully.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.info("Starting Todo API on %s:%s", settings.host, settings.port)
    try:
        await server.serve()
    finally:
        server.should_exit = True
    logging.info("Server stopped")
    return server.started


def main() -> None:
    setup_logging(settings.log_level)
    try:
        started = asyncio.run(serve())
    except (KeyboardInterrupt, SystemExit):
        return
    if not started:
        logging.critical("Application failed to start")
        sys.exit(1)


if __name__ == "__main__":
    main()
