"""
MongoDB connection management.

This module provides ``MongoConnection``, the single owner of the
process-wide ``MongoClient``.  The application lifespan calls
``connect`` before serving the first request and ``close`` after the
server stops; endpoints receive the collection handle through a FastAPI
dependency and never touch the client directly.

Pool size, timeouts and other driver options come from the connection
string.  There is no retry: if the server cannot be pinged at startup
the error is raised to the caller, which treats it as fatal.
"""

import logging
import threading
from typing import Any, Callable, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import settings
from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


class MongoConnection:
    """Lazily opened, shared connection to the todo collection.

    Parameters
    ----------
    uri : str
        MongoDB connection string.
    database_name : str
        Name of the database holding the collection.
    collection_name : str
        Name of the todo collection.
    client_factory : Callable[[str], Any]
        Callable building a client from ``uri``.  Defaults to
        ``pymongo.MongoClient``; tests substitute a fake.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        collection_name: str,
        client_factory: Callable[[str], Any] = MongoClient,
    ) -> None:
        self.uri = uri
        self.database_name = database_name
        self.collection_name = collection_name
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._collection: Optional[Collection] = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls) -> "MongoConnection":
        return cls(settings.mongodb_uri, settings.mongodb_database, settings.mongodb_collection)

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> Collection:
        """Open the client, verify it with ``ping`` and return the collection.

        Only the first call does any work; later calls return the same
        handle.  Raises ``DatabaseConnectionError`` when the URI is
        missing, the client cannot be created or the ping fails.
        """
        with self._lock:
            if self._collection is not None:
                return self._collection

            if not self.uri:
                raise DatabaseConnectionError("MONGODB_URI is not set")

            try:
                client = self._client_factory(self.uri)
            except (PyMongoError, ValueError) as exc:
                raise DatabaseConnectionError(f"MongoDB connection error: {exc}") from exc

            try:
                client.admin.command("ping")
            except PyMongoError as exc:
                client.close()
                raise DatabaseConnectionError(f"MongoDB ping error: {exc}") from exc

            self._client = client
            self._collection = client[self.database_name][self.collection_name]
            logger.info(
                "Connected to MongoDB (database=%s, collection=%s)",
                self.database_name,
                self.collection_name,
            )
            return self._collection

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            raise RuntimeError("MongoConnection.connect() has not been called")
        return self._collection

    def close(self) -> None:
        """Close the client if it was opened.

        A failure to close is logged as critical and otherwise ignored so
        that shutdown can complete.
        """
        with self._lock:
            client, self._client, self._collection = self._client, None, None
        if client is None:
            return
        try:
            client.close()
        except Exception:
            logger.critical("Error disconnecting MongoDB", exc_info=True)
            return
        logger.info("Disconnected from MongoDB")
