"""
Main Application - FastAPI app factory and lifespan management
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .config import AppConfig, config as default_config
from .routers import health, tasks
from ..store import InMemoryTaskStore, TaskNotFoundError, TaskStoreBase


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    logger.info("Starting %s v%s...", app.state.config.app_name, app.state.config.version)

    yield

    # In-memory only: everything held is dropped on shutdown
    logger.info("Shutting down, discarding %d task(s)", len(app.state.task_store))


def create_app(
    config: Optional[AppConfig] = None,
    store: Optional[TaskStoreBase] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use (defaults to the environment-derived config)
        store: Task store to serve (defaults to a fresh InMemoryTaskStore)
    """
    app_config = config or default_config
    app = FastAPI(
        title=app_config.app_name,
        version=app_config.version,
        debug=app_config.debug,
        lifespan=lifespan,
    )
    app.state.config = app_config
    app.state.task_store = store if store is not None else InMemoryTaskStore()

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
        """Map a missing task to 404."""
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed JSON, missing/unknown fields and bad path IDs are all 400."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            errors.append({"field": loc, "message": error["msg"]})
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Validation error", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with logging."""
        logger.exception("Unexpected error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    app.include_router(health.router)
    app.include_router(tasks.router)

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=default_config.log_level)
    uvicorn.run(app, host=default_config.host, port=default_config.port)
