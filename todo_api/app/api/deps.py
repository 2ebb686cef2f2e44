"""
Shared FastAPI dependencies.

The todo store is constructed once by ``create_app`` (or during the
startup hook for MongoDB) and kept on ``app.state``.  Handlers receive
it through :func:`get_todo_service` instead of importing a module‑level
global, which also lets tests plug in their own store.
"""

from fastapi import Request

from todo_api.app.services.todo_service import TodoService


def get_todo_service(request: Request) -> TodoService:
    service = getattr(request.app.state, "todo_service", None)
    if service is None:
        raise RuntimeError("Todo store is not initialised")
    return service
