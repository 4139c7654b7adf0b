"""
Main entrypoint for the Order Management API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly::

    uvicorn order_management_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import build_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import configure_logging
from .services.validator import violations_from_errors


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first, then the v1 routers are mounted under
    ``/api/v1``.  Database migrations are applied when the app starts.
    """
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_db()
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.include_router(build_router(settings.enforce_references), prefix="/api/v1")

    # Bodies FastAPI cannot parse at all (missing, malformed JSON) are
    # reported in the same shape as field violations.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": violations_from_errors(list(exc.errors()))},
        )

    return app


app = create_app()
