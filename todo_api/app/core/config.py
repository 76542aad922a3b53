"""
Configuration management for the Todo API.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for every field except the MongoDB
connection string, which must be supplied before the application
starts serving.

Outside production (``ENV`` other than ``production``) a ``.env`` file in
the current working directory is loaded first so that local development
does not require exporting variables by hand.  Existing environment
variables always take precedence over values from the file.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


if os.getenv("ENV", "development").lower() != "production":
    load_dotenv(".env")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    env: str = os.getenv("ENV", "development").lower()
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Listen address for ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT") or "5050")

    # MongoDB connection string, e.g. ``mongodb://localhost:27017``.  Pool
    # size and timeouts can be tuned through URI options.
    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    mongodb_database: str = os.getenv("MONGODB_DATABASE", "todo_db")
    mongodb_collection: str = os.getenv("MONGODB_COLLECTION", "todos")

    # Built frontend assets, served at ``/`` in production only.
    static_dir: str = os.getenv("STATIC_DIR", "./client/dist")

    @property
    def is_production(self) -> bool:
        return self.env == "production"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
