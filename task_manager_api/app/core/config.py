"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match a local development setup: MongoDB on ``localhost:27017`` and
the server listening on port 3000.  Tests and embedding applications
can build their own ``Settings`` instance and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

# Directory containing the ``task_manager_api`` package.  Relative paths
# in the settings (SQLite file, static directory) are resolved against it.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Task Manager API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Which store backs the API: ``mongo``, ``sqlite`` or ``memory``.
    task_store: str = os.getenv("TASK_STORE", "mongo")

    mongo_url: str = os.getenv("MONGO_URL", "mongodb://localhost:27017")
    mongo_database: str = os.getenv("MONGO_DATABASE", "taskmanager")
    mongo_collection: str = os.getenv("MONGO_COLLECTION", "tasks")
    # Server selection timeout used by the Mongo client, in milliseconds.
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # Path of the SQLite database file used when ``task_store`` is
    # ``sqlite``.  Relative paths are resolved against the project root.
    database_url: str = os.getenv("DATABASE_URL", "task_manager.db")

    # Directory with the front end files served at ``/``.
    static_dir: str = os.getenv("STATIC_DIR", "frontend")

    # Comma‑separated list of allowed CORS origins.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def resolve_path(self, value: str) -> Path:
        """Return ``value`` as an absolute path, relative to the project root."""
        path = Path(value)
        if path.is_absolute():
            return path
        return (PROJECT_ROOT / path).resolve()

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
