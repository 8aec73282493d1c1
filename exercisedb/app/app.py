# This file loads env variables and must thus be imported before anything else.
from . import env_loader  # noqa: F401

import os
import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .constants import ROUTE_NOT_FOUND_MESSAGE
from .context import AppContext, build_context
from .models import FailureResponse
from .routers import media_router, health_router

"""FastAPI application setup for the ExerciseDB API.

Exposes the media proxy and the health check. Errors are rendered in the
`{"success": false, "message": ...}` envelope, and every response carries
an `X-Response-Time` header.
"""

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # Configure basic logging
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(filename)s:%(lineno)d",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Configure the logging for the API itself if the user specifies it.
    if "LOG_LEVEL" in os.environ:
        match os.environ["LOG_LEVEL"].upper():
            case "DEBUG":
                log_level = logging.DEBUG
            case "INFO":
                log_level = logging.INFO
            case "WARNING":
                log_level = logging.WARNING
            case "ERROR":
                log_level = logging.ERROR
            case "CRITICAL":
                log_level = logging.CRITICAL
            case _:
                raise ValueError(f"Invalid log level: {os.environ['LOG_LEVEL']}")
        logging.getLogger("exercisedb").setLevel(log_level)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # The router only sets "endpoint" once a route has matched.
    if exc.status_code == 404 and "endpoint" not in request.scope:
        message = ROUTE_NOT_FOUND_MESSAGE
    else:
        message = str(exc.detail)
    return JSONResponse(
        FailureResponse(message=message).model_dump(),
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Unhandled error on {request.method} {request.url.path}: "
        f"exception_type={type(exc).__name__}, error={exc}"
    )
    return JSONResponse(
        FailureResponse(message="Internal Server Error").model_dump(),
        status_code=500,
    )


def create_app(context: AppContext) -> FastAPI:
    """Build the FastAPI app around an explicitly constructed context."""
    app = FastAPI(
        title="ExerciseDB API - v1 (Open Source)",
        version="1.0.0",
        openapi_url="/swagger",
    )
    app.state.context = context
    app.include_router(media_router)
    app.include_router(health_router)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.middleware("http")
    async def add_response_time(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        clock = request.app.state.context.clock
        start = clock.monotonic()
        response = await call_next(request)
        elapsed_ms = round((clock.monotonic() - start) * 1000)
        response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
        logger.info(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms}ms"
        )
        return response

    return app


configure_logging()

app = create_app(build_context())
