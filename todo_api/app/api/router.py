"""
Top-level API router.

Aggregates the domain routers mounted under ``/api`` by ``main``.
"""

from fastapi import APIRouter

from .endpoints import todos

router = APIRouter()

# The todos router defines its own "/todos" paths internally.
router.include_router(todos.router, tags=["todos"])
