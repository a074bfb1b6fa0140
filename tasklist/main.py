"""FastAPI application for the task list service.

Wires settings, logging, the connection pool and the repository once at
startup, registers the error handlers and the routers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .database import init_db, integrity_check
from .database_pool import SQLiteConnectionPool
from .errors import (
    BaseError,
    BusinessError,
    ErrorCategory,
    ErrorCode,
    ValidationError,
    handle_api_error,
)
from .errors import SystemError as CustomSystemError
from .logging_config import setup_logging
from .repository import TaskRepository
from .routers import get_all_routers
from .settings import AppSettings, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    """Build the store and the repository, tear the pool down on shutdown."""
    settings: AppSettings = fastapi_app.state.settings
    setup_logging(settings)

    pool = SQLiteConnectionPool(
        db_path=settings.database_path,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        timeout=settings.db_timeout,
    )
    init_db(pool)
    logger.info("DB integrity_check: %s", integrity_check(pool))

    fastapi_app.state.db_pool = pool
    fastapi_app.state.task_repository = TaskRepository(pool)

    yield

    pool.close_pool()


def _map_error_to_http_status(error: BaseError) -> int:
    if error.category == ErrorCategory.VALIDATION:
        return 400
    elif error.category == ErrorCategory.BUSINESS and error.error_code == ErrorCode.TASK_NOT_FOUND:
        return 404
    elif error.category in (ErrorCategory.SYSTEM, ErrorCategory.DATABASE):
        return 500
    else:
        return 400


def _register_exception_handlers(fastapi_app: FastAPI) -> None:
    @fastapi_app.exception_handler(BaseError)
    async def base_error_handler(_request: Request, exc: BaseError):
        include_debug = fastapi_app.state.settings.api_debug
        return JSONResponse(
            status_code=_map_error_to_http_status(exc),
            content=handle_api_error(exc, include_debug=include_debug),
        )

    @fastapi_app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError):
        validation_error = ValidationError(
            message="Request parameter validation failed",
            error_code=ErrorCode.SCHEMA_VALIDATION_FAILED,
            context={"errors": jsonable_encoder(exc.errors())},
        )
        return JSONResponse(status_code=422, content=handle_api_error(validation_error))

    @fastapi_app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            error = BusinessError(
                message="Requested resource not found",
                context={"path": str(request.url), "method": request.method},
            )
        elif exc.status_code == 405:
            error = ValidationError(
                message="HTTP method not allowed",
                error_code=ErrorCode.INVALID_FIELD_FORMAT,
                context={"method": request.method, "path": str(request.url)},
            )
        else:
            error = CustomSystemError(
                message=exc.detail if exc.detail else f"HTTP error {exc.status_code}",
                context={"status_code": exc.status_code},
            )
        return JSONResponse(status_code=exc.status_code, content=handle_api_error(error))

    @fastapi_app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        system_error = CustomSystemError(
            message="Internal server error",
            cause=exc,
            context={
                "path": str(request.url),
                "method": request.method,
                "exception_type": type(exc).__name__,
            },
        )
        include_debug = fastapi_app.state.settings.api_debug
        return JSONResponse(status_code=500, content=handle_api_error(system_error, include_debug=include_debug))


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    settings = settings or get_settings()

    fastapi_app = FastAPI(
        title="Task List",
        description="List, add and delete tasks",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(fastapi_app)

    for router in get_all_routers():
        fastapi_app.include_router(router)

    return fastapi_app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "tasklist.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=True,
    )
