"""FastAPI application for the GTD task API."""

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gtd import __version__
from gtd.server.routes import health, tasks
from gtd.tasks import NotFoundError, TaskStore, ValidationError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from gtd.config import ServerConfig
    from gtd.db import Database

logger = logging.getLogger(__name__)


class GtdServer:
    """Main server application.

    Owns the FastAPI app, the database lifecycle and the task store.
    """

    def __init__(
        self,
        database: "Database",
        config: "ServerConfig | None" = None,
        create_schema: bool = True,
    ):
        self._database = database
        self._config = config
        self._create_schema = create_schema
        self._task_store = TaskStore(database)

        self._app = self._create_app()

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application."""
        return self._app

    @property
    def task_store(self) -> TaskStore:
        return self._task_store

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI app."""

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> "AsyncIterator[None]":
            logger.info("Starting GTD server")
            await self._database.connect()
            if self._create_schema:
                await self._database.create_schema()
            logger.info("task_store_ready total=%d", await self._task_store.count())

            yield

            logger.info("Shutting down GTD server")
            await self._database.disconnect()

        app = FastAPI(
            title="GTD API",
            description="Getting Things Done API",
            version=__version__,
            lifespan=lifespan,
        )

        app.state.server = self
        app.state.database = self._database
        app.state.task_store = self._task_store

        origins = self._config.cors_origins if self._config else ["*"]
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        _register_error_handlers(app)

        app.include_router(health.router, tags=["health"])
        app.include_router(tasks.router, prefix="/task", tags=["task"])

        return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map request and store errors onto HTTP status codes."""

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.warning(
            "request_rejected method=%s path=%s errors=%d",
            request.method,
            request.url.path,
            len(errors),
        )
        detail = errors[0].get("msg", "invalid request") if errors else "invalid request"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": detail, "errors": errors},
        )

    @app.exception_handler(ValidationError)
    async def _task_invalid(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("task_rejected path=%s reason=%s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotFoundError)
    async def _task_missing(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info("task_not_found id=%s", exc.task_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )


def create_app(
    database: "Database",
    config: "ServerConfig | None" = None,
    create_schema: bool = True,
) -> FastAPI:
    """Create the FastAPI application."""
    server = GtdServer(database=database, config=config, create_schema=create_schema)
    return server.app
