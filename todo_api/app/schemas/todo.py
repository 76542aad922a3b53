"""
Pydantic schemas for todo items.

A todo has a database-assigned identifier (the hex form of its MongoDB
``ObjectId``), a free-text ``body`` and a ``completed`` flag.  Clients
only ever send the body; identifiers and completion are controlled by
the server.
"""

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    """Schema for creating a new todo.

    Unknown fields such as ``completed`` or ``id`` are ignored.  An empty
    ``body`` passes schema validation and is rejected by the service so
    that it gets its own error message.
    """

    body: str = Field(..., description="Text of the todo")


class TodoRead(BaseModel):
    """Schema for reading a todo."""

    id: str = Field(..., description="Hex string of the todo's ObjectId")
    body: str
    completed: bool = False


class SuccessResponse(BaseModel):
    """Acknowledgement returned by update and delete."""

    success: bool = True
