"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database connection and
errors), ``schemas`` (request and response models), ``services``
(database operations) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
