"""FastAPI app initialization, exception handling"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from mlc.config import Config, get_config
from mlc.errors.base import ApplicationError
from mlc.routes.auth import auth_router
from mlc.routes.card import admin_router, card_router
from mlc.routes.operation import operation_router
from mlc.routes.place import place_router
from mlc.services.session_codec import SessionCodec

logger = logging.getLogger(__name__)


def application_exception_handler(request: Request, exc: ApplicationError):
    c = {
        "error_code": exc.error_code,
        "error": exc.error,
        "where": exc.where,
    }
    logger.error(c)
    # Only print full traceback when in debug logging
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return JSONResponse(
        status_code=exc.http_code or 418,
        content=c,
    )


def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(exc)
    if logger.isEnabledFor(logging.DEBUG):
        traceback.print_exception(exc)
    return JSONResponse(
        status_code=500,
        content={"error_code": 1500, "error": "Internal error: database"},
    )


def app_factory(config: Config | None = None) -> FastAPI:
    config = config or get_config()
    app = FastAPI(title=config.app_name, version=config.app_version)

    # a fresh signing key per process, never persisted
    app.state.session_codec = SessionCodec.generate()

    app.add_exception_handler(ApplicationError, application_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)  # type: ignore[arg-type]

    app.include_router(auth_router)
    app.include_router(place_router)
    app.include_router(operation_router)
    app.include_router(card_router)
    app.include_router(admin_router)
    return app
