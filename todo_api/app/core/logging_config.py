"""
Logging setup for the Todo API.

The service writes two kinds of records to the console: application
messages from the ``todo_api`` modules, and one line per request on the
``todo_api.access`` logger, written by the middleware in ``main``.
uvicorn's own access logger is quietened so requests are not logged
twice.
"""

import logging

ACCESS_LOGGER_NAME = "todo_api.access"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger and set levels.

    Only the first call has an effect.  ``level`` is a level name such
    as ``"debug"``; unknown names fall back to ``INFO``.
    """
    global _configured
    if _configured:
        return
    _configured = True

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
