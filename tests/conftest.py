"""
pytest configuration and fixtures.

The application is exercised through FastAPI's ``TestClient`` with an
in-memory stand-in for the MongoDB collection, so no database server is
needed.
"""

from typing import Any, Dict, Iterator, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from todo_api.app.main import create_app


BACKEND_ERROR_TEXT = "connection reset by peer: secret-host:27017"


class FakeCollection:
    """Minimal in-memory imitation of a pymongo collection.

    Only the calls used by ``TodoService`` are implemented and they return
    real pymongo result objects.  Setting ``fail_on`` to a method name
    makes that method raise ``OperationFailure`` with
    ``BACKEND_ERROR_TEXT``; ``fail_on = "cursor"`` makes the cursor
    returned by ``find`` raise after yielding its first document, the way
    a lazy pymongo cursor fails on a later batch.  ``acknowledged = False``
    mimics a ``w=0`` write concern.
    """

    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.calls: List[str] = []
        self.fail_on: Optional[str] = None
        self.acknowledged = True

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise OperationFailure(BACKEND_ERROR_TEXT)

    def _match(self, flt: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [doc for doc in self.documents if all(doc.get(k) == v for k, v in flt.items())]

    def _cursor(self, documents: List[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
        for index, doc in enumerate(documents):
            if index == 1 and self.fail_on == "cursor":
                raise OperationFailure(BACKEND_ERROR_TEXT)
            yield doc
        if self.fail_on == "cursor":
            raise OperationFailure(BACKEND_ERROR_TEXT)

    def find(self, flt: Dict[str, Any]) -> Iterator[Dict[str, Any]]:
        self._record("find")
        return self._cursor([dict(doc) for doc in self._match(flt)])

    def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        self._record("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return InsertOneResult(document["_id"], self.acknowledged)

    def update_one(self, flt: Dict[str, Any], update: Dict[str, Any]) -> UpdateResult:
        self._record("update_one")
        matched = self._match(flt)[:1]
        for doc in matched:
            doc.update(update["$set"])
        raw = {"n": len(matched), "nModified": len(matched)} if self.acknowledged else {}
        return UpdateResult(raw, self.acknowledged)

    def delete_one(self, flt: Dict[str, Any]) -> DeleteResult:
        self._record("delete_one")
        matched = self._match(flt)[:1]
        for doc in matched:
            self.documents.remove(doc)
        raw = {"n": len(matched)} if self.acknowledged else {}
        return DeleteResult(raw, self.acknowledged)


class StubConnection:
    """Stands in for ``MongoConnection`` in the application lifespan."""

    def __init__(self, collection: FakeCollection) -> None:
        self._collection = collection
        self.connect_calls = 0
        self.close_calls = 0

    def connect(self) -> FakeCollection:
        self.connect_calls += 1
        return self._collection

    @property
    def collection(self) -> FakeCollection:
        return self._collection

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def connection(collection: FakeCollection) -> StubConnection:
    return StubConnection(collection)


@pytest.fixture
def client(connection: StubConnection) -> Iterator[TestClient]:
    app = create_app(connection=connection, serve_frontend=False)
    with TestClient(app) as test_client:
        yield test_client
