"""
Error types and backend error translation.

Every error a request can end in is a ``TodoAPIError`` carrying an HTTP
status code and a short message that is safe to show to clients.  The
exception handlers registered in ``main`` render these as
``{"error": message}``.

Database failures never reach the client verbatim.  Services wrap each
driver call in ``translate_backend_errors`` which logs the original
exception and raises a ``StorageError`` with a generic, per-operation
message instead.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from bson.errors import BSONError
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class TodoAPIError(Exception):
    """Base class for errors rendered as JSON error responses."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequestError(TodoAPIError):
    """The request body could not be parsed into a todo payload."""

    status_code = 400
    message = "Invalid request"


class EmptyTodoBodyError(InvalidRequestError):
    message = "Todo body cannot be empty"


class InvalidTodoIdError(InvalidRequestError):
    message = "Invalid todo ID"


class StorageError(TodoAPIError):
    """A database operation failed; the message is deliberately generic."""

    status_code = 500


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be reached at startup."""


# Client-facing messages for each kind of backend operation.
BACKEND_FAILURE_MESSAGES: Dict[str, str] = {
    "list": "Failed to fetch todos",
    "decode": "Failed to parse todo",
    "create": "Failed to insert todo",
    "update": "Failed to update todo",
    "delete": "Failed to delete todo",
}


def storage_error_for(operation: str) -> StorageError:
    """Return the ``StorageError`` reported to clients for ``operation``."""
    return StorageError(BACKEND_FAILURE_MESSAGES.get(operation, TodoAPIError.message))


@contextmanager
def translate_backend_errors(operation: str) -> Iterator[None]:
    """Convert driver exceptions raised inside the block to ``StorageError``.

    The original exception is logged with its traceback and chained to the
    raised error, but its text is not part of the client message.
    """
    try:
        yield
    except (PyMongoError, BSONError) as exc:
        logger.error("Database %s operation failed: %s", operation, exc, exc_info=True)
        raise storage_error_for(operation) from exc
