"""
Main entrypoint for the Task Manager API.

This module assembles the FastAPI application: logging, CORS, the
task routes and the static front end.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app`` so it can be served directly, e.g.::

    uvicorn task_manager_api.app.main:app --reload

The task store is created when the application starts (unless one is
passed in) and kept on ``app.state.task_store`` for the lifetime of
the process.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .storage import build_task_store
from .storage.base import TaskStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[TaskStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the environment‑derived
        ``settings`` instance.
    store : Optional[TaskStore]
        Task store to serve from.  When omitted, a store is built from
        ``settings`` at startup and closed at shutdown.  A store passed
        in here is connected at startup but left open; the caller owns it.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_store = app.state.task_store is None
        if owns_store:
            app.state.task_store = build_task_store(settings)
        # Connection problems are logged by the store; startup continues.
        await app.state.task_store.connect()
        try:
            yield
        finally:
            if owns_store:
                await app.state.task_store.close()
                app.state.task_store = None

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.task_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The unversioned prefix is what the front end calls; /api/v1 exposes
    # the same routes for clients that pin a version.
    app.include_router(v1_router, prefix="/api")
    app.include_router(v1_router, prefix="/api/v1")

    # Static files are mounted last so the API routes take precedence.
    static_dir = settings.resolve_path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.warning("Static directory %s not found; front end will not be served", static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
