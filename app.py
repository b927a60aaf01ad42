"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.v1 import api_router
from core import configure_logging, settings

logger = logging.getLogger(__name__)


async def _persistence_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Persistence failure",
        extra={"path": request.url.path, "method": request.method},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Persistence failure"},
    )


def create_app() -> FastAPI:
    configure_logging(settings.log_level)
    application = FastAPI(title="Notices API")
    application.include_router(api_router, prefix="/api")
    application.add_exception_handler(SQLAlchemyError, _persistence_error_handler)
    return application
