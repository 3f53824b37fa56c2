from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger("nc_news.errors")

PATH_NOT_FOUND = "Path not found"
BAD_REQUEST = "Bad request"
INTERNAL_ERROR = "Internal server error"


class ApiError(Exception):
    status_code = 500

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class BadRequest(ApiError):
    status_code = 400


class NotFound(ApiError):
    status_code = 404


def _msg(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def api_error_handler(_request: Request, exc: ApiError) -> JSONResponse:
    return _msg(exc.status_code, exc.msg)


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown path and known path with another method both mean "no route".
    if exc.status_code in (404, 405):
        return _msg(404, PATH_NOT_FOUND)
    return _msg(exc.status_code, str(exc.detail))


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "Request failed validation",
        extra={"event": "request_validation_failed", "errors": exc.errors()},
    )
    return _msg(400, BAD_REQUEST)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"event": "unhandled_error", "path": request.url.path},
    )
    return _msg(500, INTERNAL_ERROR)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
