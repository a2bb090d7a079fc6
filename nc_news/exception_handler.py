import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import DataError, IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from nc_news.exceptions import (
    ApiError,
    BadRequest,
    MethodNotAllowed,
    NotFound,
    RouteNotFound,
)

logger = logging.getLogger(__name__)


def _error_response(exc: ApiError, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code, content={"msg": exc.msg}, headers=headers
    )


def api_exception_handler(_request: Request, exc: ApiError):
    return _error_response(exc)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    라우터가 직접 던지는 HTTPException 처리.
    경로가 없으면 404, 경로는 있지만 메서드가 없으면 405가 들어옴
    """
    if exc.status_code == 404:
        logger.warning("Route not found: %s %s", request.method, request.url.path)
        return _error_response(RouteNotFound(), exc.headers)
    if exc.status_code == 405:
        logger.warning("Invalid method: %s %s", request.method, request.url.path)
        return _error_response(MethodNotAllowed(), exc.headers)
    return JSONResponse(
        status_code=exc.status_code, content={"msg": exc.detail}, headers=exc.headers
    )


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(
        "Bad request on %s %s: %s", request.method, request.url.path, exc.errors()
    )
    return _error_response(BadRequest())


def data_error_handler(_request: Request, exc: DataError):
    logger.info("Rejected by the database: %s", exc.orig)
    return _error_response(BadRequest())


def integrity_error_handler(_request: Request, exc: IntegrityError):
    # 외래키가 가리키는 행이 없는 경우
    logger.warning("Integrity error: %s", exc.orig)
    return _error_response(NotFound())
