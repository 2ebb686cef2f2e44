"""
Store interface for todo items.

``TodoService`` is the capability the API handlers depend on.  Two
implementations exist: :class:`~todo_api.app.services.memory_service.InMemoryTodoService`
keeps todos in the process and
:class:`~todo_api.app.services.mongo_service.MongoTodoService` persists
them in a MongoDB collection.  Both must behave identically from the
outside: the same errors for the same inputs and the same shapes for
returned records.

Services raise the ``TodoError`` subclasses defined here; the endpoint
layer translates them into HTTP status codes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from todo_api.app.schemas.todo import TodoRead


class TodoError(ValueError):
    """Base class for errors raised by todo services."""

    message = "Todo error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyBodyError(TodoError):
    message = "Todo body cannot be empty"


class InvalidTodoIdError(TodoError):
    message = "Invalid todo ID"


class TodoNotFoundError(TodoError):
    message = "Todo not found"


class TodoService(ABC):
    """Abstract todo store."""

    @abstractmethod
    async def list_todos(self) -> List[TodoRead]:
        """Return all todos in insertion / storage order."""

    @abstractmethod
    async def create_todo(self, body: str) -> TodoRead:
        """Store a new, not yet completed todo and return it with its id.

        Raises
        ------
        EmptyBodyError
            If ``body`` is empty.
        """

    @abstractmethod
    async def complete_todo(self, todo_id: str) -> TodoRead:
        """Mark the todo as completed and return the updated record.

        Raises
        ------
        InvalidTodoIdError
            If ``todo_id`` is not an identifier this store could have issued.
        TodoNotFoundError
            If no todo has that identifier.
        """

    @abstractmethod
    async def delete_todo(self, todo_id: str) -> None:
        """Remove the todo.

        Raises
        ------
        InvalidTodoIdError
            If ``todo_id`` is malformed.
        TodoNotFoundError
            If no todo has that identifier.
        """

    async def close(self) -> None:
        """Release backend resources.  Nothing to do by default."""

    @staticmethod
    def _validate_body(body: str) -> None:
        if not body:
            raise EmptyBodyError()
