"""
Top‑level router for version 1 of the API.

The tasks router defines its own ``/tasks`` path internally, so it is
included without a prefix here.  ``main`` mounts this router under
both ``/api`` and ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import tasks

router = APIRouter()

router.include_router(tasks.router, tags=["tasks"])
