"""
FastAPI application factory.

Architecture Decision: Explicit wiring
The task store is built here (or passed in by tests) and parked on
app.state; routes pull it through a dependency instead of a module global.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from todoapp.infra.config import Settings, get_settings
from todoapp.infra.db import open_database
from todoapp.infra.repository import TaskRepository, TaskStore
from todoapp.services.task_service import TaskService
from todoapp.web.routes import router


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Configuration used to open the database. Defaults to the
                  global settings.
        store: Ready-made task store. When given, no database is opened.

    Returns:
        Configured FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            yield
            return

        # StartupError propagates and aborts server startup
        db = await open_database(settings or get_settings())
        app.state.task_service = TaskService(TaskRepository(db))
        try:
            yield
        finally:
            await db.dispose()

    app = FastAPI(title="To-Do List", lifespan=lifespan)
    app.include_router(router)

    if store is not None:
        app.state.task_service = TaskService(store)

    return app
