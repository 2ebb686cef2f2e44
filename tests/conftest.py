"""
Pytest configuration and fixtures
"""
import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

# Always import the app against the in-memory store, whatever a local
# .env file says.
os.environ["TODO_STORAGE"] = "memory"

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from todo_api.app.main import create_app  # noqa: E402
from todo_api.app.services.memory_service import InMemoryTodoService  # noqa: E402
from todo_api.app.services.mongo_service import MongoTodoService  # noqa: E402


class FakeCollection:
    """Stand-in for a motor collection, keeping documents in a list.

    Only the calls made by ``MongoTodoService`` are supported.
    """

    def __init__(self):
        self.documents = []

    def find(self, query):
        assert query == {}

        async def _iterate():
            for document in list(self.documents):
                yield dict(document)

        return _iterate()

    async def insert_one(self, document):
        document = dict(document)
        document["_id"] = ObjectId()
        self.documents.append(document)
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        for document in self.documents:
            if document["_id"] == query["_id"]:
                before = dict(document)
                document.update(update["$set"])
                return dict(document) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query):
        for index, document in enumerate(self.documents):
            if document["_id"] == query["_id"]:
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


@pytest.fixture
def fake_collection():
    return FakeCollection()


@pytest.fixture
def memory_service():
    return InMemoryTodoService()


@pytest.fixture
def mongo_service(fake_collection):
    return MongoTodoService(fake_collection)


@pytest.fixture(params=["memory", "mongo"])
def todo_service(request):
    """Each store in turn, so API behaviour is checked for both."""
    if request.param == "memory":
        return InMemoryTodoService()
    return MongoTodoService(FakeCollection())


@pytest.fixture
def client(todo_service):
    """Create a test client serving ``todo_service``"""
    with TestClient(create_app(store=todo_service)) as test_client:
        yield test_client


@pytest.fixture
def missing_id(todo_service):
    """A well-formed id that no store has issued."""
    if isinstance(todo_service, InMemoryTodoService):
        return "999"
    return str(ObjectId())
