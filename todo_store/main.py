"""FastAPI application for the todo API."""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from fastapi import FastAPI, Request

from todo_store import __version__
from todo_store.api.routes import router as api_router
from todo_store.logging_utils import configure_logging, reset_request_id, set_request_id
from todo_store.repositories import TodoRepository, TodoRepositoryForMemory
from todo_store.settings import get_settings

logger = logging.getLogger(__name__)


def create_app(repository: Optional[TodoRepository] = None) -> FastAPI:
    """Build the application around one shared repository handle."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.api_title,
        description="A simple todo management API with CRUD operations",
        version=__version__,
    )
    app.state.todo_repository = repository if repository is not None else TodoRepositoryForMemory()

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with basic API info."""
        return {
            "message": settings.api_title,
            "endpoints": "/api/todos",
        }

    app.include_router(api_router, prefix="/api")
    app.include_router(api_router)
    logger.info("Todo API ready (backend=%s)", type(app.state.todo_repository).__name__)
    return app


app = create_app()
