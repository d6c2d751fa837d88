"""FastAPI application for the exercise-tracker API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __version__
from ..config import Settings, get_settings
from ..db import Database, ExerciseRepository, UserRepository
from ..errors import ErrorKind, ServiceError
from ..logging_config import setup_logging
from ..services import ExerciseService, UserService
from .routers import users

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared database on startup and close it on shutdown."""
    database = Database(app.state.settings.database_path)
    connection = await database.open()

    user_service = UserService(UserRepository(connection))
    app.state.database = database
    app.state.user_service = user_service
    app.state.exercise_service = ExerciseService(
        ExerciseRepository(connection), user_service
    )
    logger.info("Exercise tracker API ready")
    try:
        yield
    finally:
        await database.close()


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Map a classified service failure to its status code."""
    status_code = STATUS_BY_KIND.get(exc.kind, 500)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render framework HTTP errors in the same ``{"error": ...}`` shape."""
    message = "Route not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for failures that were never classified."""
    logger.error(
        "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.api_title,
        description="Track users and their logged exercises",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(users.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
