"""
Main entrypoint for the Todo API.

This module assembles the FastAPI application, sets up logging, CORS
and error handlers, and includes the API router under ``/api``.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn todo_api.app.main:app --reload

The todo store is passed in explicitly.  When ``create_app`` is called
without one, the store is chosen by ``settings.storage_backend``: the
in‑memory store is built immediately, the MongoDB store is connected
when the application starts up (see ``lifespan``).  Whatever store is
served gets closed on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core import db
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.memory_service import InMemoryTodoService
from .services.mongo_service import MongoTodoService
from .services.todo_service import TodoService

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = {"memory", "mongo"}


def create_app(store: Optional[TodoService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[TodoService]
        Todo store to serve.  If omitted, one is built from ``settings``.
    settings : Optional[Settings]
        Configuration to use; defaults to the process‑wide settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    RuntimeError
        If no store is given and ``settings.storage_backend`` names an
        unknown backend.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup messages
    # are formatted consistently.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None and settings.storage_backend not in STORAGE_BACKENDS:
        raise RuntimeError(
            f"Unknown TODO_STORAGE {settings.storage_backend!r}; expected one of {sorted(STORAGE_BACKENDS)}"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.todo_service is None:
            try:
                client, collection = await db.connect(settings)
            except RuntimeError:
                logger.critical("MongoDB is unavailable, refusing to start", exc_info=True)
                raise
            app.state.todo_service = MongoTodoService(collection, client=client)
            logger.info(
                "Serving todos from MongoDB collection %s.%s",
                settings.mongodb_database,
                settings.mongodb_collection,
            )
        else:
            logger.info("Serving todos from %s", type(app.state.todo_service).__name__)
        try:
            yield
        finally:
            await app.state.todo_service.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
        allow_credentials=True,
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    if store is None and settings.storage_backend == "memory":
        store = InMemoryTodoService()
    app.state.todo_service = store

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
