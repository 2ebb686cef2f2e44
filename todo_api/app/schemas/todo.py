"""
Pydantic schemas for todo items.

A todo consists of an identifier assigned by the store, a completion
flag and a text body.  The in‑memory store hands out integer ids while
the MongoDB store uses the hex form of the document's ObjectId, so the
``id`` field accepts either.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a new todo.

    ``body`` defaults to an empty string so that a missing field and an
    empty one are rejected by the same check in the service layer.
    """

    body: str = Field("", description="Text of the todo; must not be empty")


class TodoRead(BaseModel):
    """Schema for a todo returned by the API."""

    id: Optional[Union[int, str]] = None
    completed: bool = False
    body: str

    model_config = {
        "from_attributes": True,
    }


class SuccessResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    """Body of every non‑2xx response."""

    error: str
