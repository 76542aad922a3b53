"""
Todo endpoints.

These routes expose list, create, complete and delete operations over
the todo collection.  Endpoints are plain functions so that FastAPI runs
them in its thread pool; the blocking MongoDB driver never holds up the
event loop.  Errors raised by the service are rendered by the
application's exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from todo_api.app.api.deps import get_todo_service
from todo_api.app.schemas.todo import SuccessResponse, TodoCreate, TodoRead
from todo_api.app.services.todo_service import TodoService

router = APIRouter()


@router.get("/todos", response_model=List[TodoRead])
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return all todos in the order the database yields them."""
    return service.list_todos()


@router.post("/todos", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_in: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Create a new todo.  ``completed`` always starts out false."""
    return service.create_todo(todo_in)


@router.patch("/todos/{todo_id}", response_model=SuccessResponse)
def complete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> SuccessResponse:
    """Mark a todo as completed.

    Succeeds for any well-formed identifier, including ones that match no
    stored todo.
    """
    service.complete_todo(todo_id)
    return SuccessResponse()


@router.delete("/todos/{todo_id}", response_model=SuccessResponse)
def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> SuccessResponse:
    """Delete a todo.  Missing todos are not reported."""
    service.delete_todo(todo_id)
    return SuccessResponse()
