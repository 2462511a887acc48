import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.schemas.bfhl import ErrorSchema
from app.services.errors import (
    BaseServiceError,
    InternalFailureError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


def error_response(error: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        ErrorSchema(error=error).model_dump(), status_code=status_code
    )


class DetailJsonExceptionHandler:
    def __init__(self, status_code: int):
        self.status_code = status_code

    async def __call__(self, request: Request, exc: BaseServiceError) -> JSONResponse:
        return error_response(exc.detail, self.status_code)


async def validation_error_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Rejected payload: %s", exc.errors())
    return error_response(InvalidInputError.detail, status.HTTP_400_BAD_REQUEST)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return error_response("Route not found", status.HTTP_404_NOT_FOUND)
    return error_response(str(exc.detail), exc.status_code)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turns any uncaught error into the generic 500 body.

    Registered inside the CORS middleware so the response keeps its headers.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled error on %s %s", request.method, request.url.path
            )
            return error_response(
                "Something went wrong!", status.HTTP_500_INTERNAL_SERVER_ERROR
            )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(
        InternalFailureError,
        DetailJsonExceptionHandler(status.HTTP_500_INTERNAL_SERVER_ERROR),
    )
    app.add_exception_handler(
        BaseServiceError, DetailJsonExceptionHandler(status.HTTP_400_BAD_REQUEST)
    )
    app.add_exception_handler(
        RequestValidationError, validation_error_exception_handler
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(UnhandledErrorMiddleware)
