"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application: logging, middleware,
exception handlers, the ``/api`` routes and, in production, the built
frontend.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so that it can be served
with uvicorn directly, e.g.::

    uvicorn todo_api.app.main:app --port 5050

The MongoDB connection is owned by the application.  It is opened when
the lifespan starts and closed exactly once when it ends, whichever way
the server was stopped.
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from .api.router import router as api_router
from .core.config import settings
from .core.db import MongoConnection
from .core.errors import DatabaseConnectionError, InvalidRequestError, TodoAPIError
from .core.logging_config import ACCESS_LOGGER_NAME, setup_logging

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    connection = app.state.db
    try:
        await run_in_threadpool(connection.connect)
    except DatabaseConnectionError:
        logger.critical("Cannot start without a database connection", exc_info=True)
        raise
    try:
        yield
    finally:
        connection.close()


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TodoAPIError)
    async def todo_api_error_handler(request: Request, exc: TodoAPIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
        error = InvalidRequestError()
        return JSONResponse(status_code=error.status_code, content={"error": error.message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        error = TodoAPIError()
        return JSONResponse(status_code=error.status_code, content={"error": error.message})


def _mount_frontend(app: FastAPI, static_dir: str) -> None:
    directory = Path(static_dir)
    if not directory.is_dir():
        logger.warning("Static directory %s not found; frontend will not be served", directory)
        return
    app.mount("/", StaticFiles(directory=str(directory), html=True), name="frontend")


def create_app(
    connection: Optional[MongoConnection] = None,
    serve_frontend: Optional[bool] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    connection : Optional[MongoConnection]
        Connection manager providing the todo collection.  Defaults to
        one built from the environment settings.  It is not opened
        until the application starts.
    serve_frontend : Optional[bool]
        Whether to serve ``settings.static_dir`` at ``/``.  Defaults to
        true in production only.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.db = connection if connection is not None else MongoConnection.from_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    _register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    if serve_frontend is None:
        serve_frontend = settings.is_production
    # Mounted last so that /api routes take precedence.
    if serve_frontend:
        _mount_frontend(app, settings.static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
