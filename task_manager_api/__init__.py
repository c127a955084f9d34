"""
Top‑level package for the Task Manager API.

The HTTP service lives under ``app`` and can be imported with fully
qualified names like ``task_manager_api.app.main``.  The ``client``
module provides a small HTTP client for scripts that talk to a
running service.
"""

__all__ = []
