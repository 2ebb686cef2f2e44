"""
MongoDB todo store.

Each todo is a document ``{_id: ObjectId, completed: bool, body: str}``
in a single collection.  The ObjectId is the primary key and is exposed
through the API as its 24 character hex string.  Every operation maps
to exactly one driver call; driver errors propagate to the caller
unchanged and there are no retries or transactions.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument

from todo_api.app.schemas.todo import TodoRead
from todo_api.app.services.todo_service import (
    InvalidTodoIdError,
    TodoNotFoundError,
    TodoService,
)

logger = logging.getLogger(__name__)


class MongoTodoService(TodoService):
    """Todo store backed by a motor collection.

    Parameters
    ----------
    collection
        An ``AsyncIOMotorCollection`` (or any object exposing the same
        coroutine methods) holding the todo documents.
    client
        Optional owning ``AsyncIOMotorClient``; closed by :meth:`close`.
    """

    def __init__(self, collection: Any, client: Optional[Any] = None) -> None:
        self._collection = collection
        self._client = client

    @staticmethod
    def _parse_id(todo_id: str) -> ObjectId:
        if not ObjectId.is_valid(todo_id):
            raise InvalidTodoIdError()
        return ObjectId(todo_id)

    @staticmethod
    def _document_to_todo(document: Dict[str, Any]) -> TodoRead:
        raw_id = document.get("_id")
        return TodoRead(
            id=str(raw_id) if raw_id is not None else None,
            completed=bool(document.get("completed", False)),
            body=document.get("body", ""),
        )

    async def list_todos(self) -> List[TodoRead]:
        todos: List[TodoRead] = []
        async for document in self._collection.find({}):
            todos.append(self._document_to_todo(document))
        return todos

    async def create_todo(self, body: str) -> TodoRead:
        self._validate_body(body)
        result = await self._collection.insert_one({"completed": False, "body": body})
        logger.info("Created todo %s", result.inserted_id)
        return TodoRead(id=str(result.inserted_id), completed=False, body=body)

    async def complete_todo(self, todo_id: str) -> TodoRead:
        object_id = self._parse_id(todo_id)
        document = await self._collection.find_one_and_update(
            {"_id": object_id},
            {"$set": {"completed": True}},
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            raise TodoNotFoundError()
        logger.info("Completed todo %s", object_id)
        return self._document_to_todo(document)

    async def delete_todo(self, todo_id: str) -> None:
        object_id = self._parse_id(todo_id)
        result = await self._collection.delete_one({"_id": object_id})
        if result.deleted_count == 0:
            raise TodoNotFoundError()
        logger.info("Deleted todo %s", object_id)

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
