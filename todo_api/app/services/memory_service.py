"""
In‑memory todo store.

Todos live in an ordered list owned by the service instance.  Ids are
assigned from a per‑instance counter starting at 1 and are never
reused, even after a delete.  Every operation holds a single
``asyncio.Lock`` so that concurrent requests cannot interleave a
lookup with a mutation.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import List

from todo_api.app.schemas.todo import TodoRead
from todo_api.app.services.todo_service import (
    InvalidTodoIdError,
    TodoNotFoundError,
    TodoService,
)

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only: no underscores, whitespace or
# non-ASCII digits.
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InMemoryTodoService(TodoService):
    """Todo store backed by a list in process memory."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._todos: List[TodoRead] = []
        self._last_id = 0

    @staticmethod
    def _parse_id(todo_id: str) -> int:
        if not isinstance(todo_id, str) or not _ID_PATTERN.fullmatch(todo_id):
            raise InvalidTodoIdError()
        return int(todo_id)

    def _index_of(self, todo_id: int) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise TodoNotFoundError()

    async def list_todos(self) -> List[TodoRead]:
        async with self._lock:
            return [todo.model_copy() for todo in self._todos]

    async def create_todo(self, body: str) -> TodoRead:
        self._validate_body(body)
        async with self._lock:
            self._last_id += 1
            todo = TodoRead(id=self._last_id, completed=False, body=body)
            self._todos.append(todo)
            logger.info("Created todo %s", todo.id)
            return todo.model_copy()

    async def complete_todo(self, todo_id: str) -> TodoRead:
        numeric_id = self._parse_id(todo_id)
        async with self._lock:
            todo = self._todos[self._index_of(numeric_id)]
            todo.completed = True
            logger.info("Completed todo %s", numeric_id)
            return todo.model_copy()

    async def delete_todo(self, todo_id: str) -> None:
        numeric_id = self._parse_id(todo_id)
        async with self._lock:
            del self._todos[self._index_of(numeric_id)]
            logger.info("Deleted todo %s", numeric_id)
