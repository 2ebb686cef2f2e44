"""
Todo endpoints.

These routes expose a small CRUD API over todo items: list all todos,
create one, mark one as completed and delete one.  Each handler
performs exactly one call on the injected store and translates its
errors into HTTP responses:

* empty body or malformed id → 400
* unknown id → 404
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from todo_api.app.api.deps import get_todo_service
from todo_api.app.schemas.todo import ErrorResponse, SuccessResponse, TodoCreate, TodoRead
from todo_api.app.services.todo_service import (
    EmptyBodyError,
    InvalidTodoIdError,
    TodoNotFoundError,
    TodoService,
)

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


def _lookup_error(exc: Exception) -> HTTPException:
    if isinstance(exc, TodoNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("", response_model=List[TodoRead], response_model_exclude_none=True)
async def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return every todo in storage order."""
    return await service.list_todos()


@router.post(
    "",
    response_model=TodoRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_todo(
    todo_in: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Create a todo.

    The request body must be a JSON object with a non‑empty ``body``
    string.  New todos always start out not completed.
    """
    try:
        return await service.create_todo(todo_in.body)
    except EmptyBodyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.patch("/{todo_id}", response_model=TodoRead, response_model_exclude_none=True, responses=_ERROR_RESPONSES)
async def complete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Mark a todo as completed and return it."""
    try:
        return await service.complete_todo(todo_id)
    except (InvalidTodoIdError, TodoNotFoundError) as exc:
        raise _lookup_error(exc) from exc


@router.delete("/{todo_id}", response_model=SuccessResponse, responses=_ERROR_RESPONSES)
async def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> SuccessResponse:
    """Delete a todo."""
    try:
        await service.delete_todo(todo_id)
    except (InvalidTodoIdError, TodoNotFoundError) as exc:
        raise _lookup_error(exc) from exc
    return SuccessResponse(success=True)
