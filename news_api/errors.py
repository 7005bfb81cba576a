"""
Error taxonomy and the centralized exception handlers.

Domain operations raise an ``ApiError`` subclass when they know the precise
cause (a missing row, an unusable reference).  Everything else, request
validation failures and errors raised by the database driver, propagates
untouched and is mapped here by type.  Every response body has the shape
``{"msg": str}``; internal details are logged, never returned.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST_MSG = "bad request"
PATH_NOT_FOUND_MSG = "path not found"
INTERNAL_ERROR_MSG = "internal server error"


class ApiError(Exception):
    status_code: int = 500
    default_msg: str = INTERNAL_ERROR_MSG

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(ApiError):
    status_code = 400
    default_msg = BAD_REQUEST_MSG


class NotFound(ApiError):
    status_code = 404
    default_msg = "not found"


class InternalError(ApiError):
    status_code = 500
    default_msg = INTERNAL_ERROR_MSG


def _msg(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.msg)
    else:
        logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.msg)
    return _msg(exc.status_code, exc.msg)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400 invalid request: %s", request.method, request.url.path, exc.errors())
    return _msg(400, BAD_REQUEST_MSG)


async def bad_input_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Invalid input for a column type, or a broken foreign-key reference."""
    logger.warning(
        "%s %s -> 400 rejected by database: %s",
        request.method, request.url.path, getattr(exc, "orig", exc),
    )
    return _msg(400, BAD_REQUEST_MSG)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s -> 500 database failure", request.method, request.url.path)
    return _msg(500, INTERNAL_ERROR_MSG)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown path, or a known path without a route for this method.
    if exc.status_code in (404, 405):
        return _msg(404, PATH_NOT_FOUND_MSG)
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s -> 500 unhandled error", request.method, request.url.path)
    return _msg(500, INTERNAL_ERROR_MSG)


def register_error_handlers(app: FastAPI) -> None:
    """Attach one handler per error type; the most specific class wins."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(DataError, bad_input_error_handler)
    app.add_exception_handler(IntegrityError, bad_input_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
