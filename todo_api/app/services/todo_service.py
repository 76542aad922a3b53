"""
Service layer for todo items.

``TodoService`` wraps the MongoDB collection handle it is constructed
with and exposes one method per API operation.  Each method performs a
single driver call inside ``translate_backend_errors`` so that database
failures surface as ``StorageError`` with a generic message.

Update and delete do not check whether a document matched: both report
success for well-formed identifiers that do not exist.  Listing applies
no sort and returns documents in cursor order.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from bson import ObjectId
from pydantic import ValidationError
from pymongo.collection import Collection

from todo_api.app.core.errors import (
    EmptyTodoBodyError,
    InvalidTodoIdError,
    storage_error_for,
    translate_backend_errors,
)
from todo_api.app.schemas.todo import TodoCreate, TodoRead

logger = logging.getLogger(__name__)


def parse_todo_id(todo_id: str) -> ObjectId:
    """Convert a path identifier to an ``ObjectId``.

    Raises ``InvalidTodoIdError`` unless ``todo_id`` is a 24 character
    hex string.
    """
    if not isinstance(todo_id, str) or not ObjectId.is_valid(todo_id):
        raise InvalidTodoIdError()
    return ObjectId(todo_id)


class TodoService:
    """CRUD operations over the todo collection."""

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def list_todos(self) -> List[TodoRead]:
        """Return every stored todo.

        A document that cannot be decoded fails the whole request; no
        partial list is returned.
        """
        with translate_backend_errors("list"):
            documents = list(self.collection.find({}))
        return [self._document_to_todo(doc) for doc in documents]

    def create_todo(self, data: TodoCreate) -> TodoRead:
        """Insert a new, incomplete todo and return it with its identifier."""
        if not data.body:
            raise EmptyTodoBodyError()
        document = {"body": data.body, "completed": False}
        with translate_backend_errors("create"):
            result = self.collection.insert_one(document)
        logger.info("Created todo %s", result.inserted_id)
        return TodoRead(id=str(result.inserted_id), body=data.body, completed=False)

    def complete_todo(self, todo_id: str) -> None:
        """Mark the todo as completed; a missing todo is not an error."""
        object_id = parse_todo_id(todo_id)
        with translate_backend_errors("update"):
            result = self.collection.update_one(
                {"_id": object_id}, {"$set": {"completed": True}}
            )
        # Counts are only available for acknowledged writes (not with w=0).
        if result.acknowledged:
            logger.debug("Completed todo %s (matched=%s)", object_id, result.matched_count)

    def delete_todo(self, todo_id: str) -> None:
        """Remove the todo; a missing todo is not an error."""
        object_id = parse_todo_id(todo_id)
        with translate_backend_errors("delete"):
            result = self.collection.delete_one({"_id": object_id})
        if result.acknowledged:
            logger.debug("Deleted todo %s (deleted=%s)", object_id, result.deleted_count)

    @staticmethod
    def _document_to_todo(document: Mapping[str, Any]) -> TodoRead:
        try:
            return TodoRead(
                id=str(document["_id"]),
                body=document["body"],
                completed=document.get("completed") or False,
            )
        except (KeyError, ValidationError) as exc:
            logger.error("Failed to decode todo document %r: %s", document.get("_id"), exc)
            raise storage_error_for("decode") from exc
