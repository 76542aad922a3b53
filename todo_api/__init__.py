"""
Top-level package for the Todo API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``todo_api.app.main:app``.
"""

__all__ = []
