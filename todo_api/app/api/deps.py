"""
Shared FastAPI dependencies.

The connection opened by the application lifespan is stored on
``app.state``; ``get_todo_service`` hands endpoints a service bound to
its collection.
"""

from fastapi import Request

from todo_api.app.services.todo_service import TodoService


def get_todo_service(request: Request) -> TodoService:
    """Return a ``TodoService`` for the application's todo collection."""
    return TodoService(request.app.state.db.collection)
