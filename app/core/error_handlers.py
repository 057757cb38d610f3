"""
Обработчики ошибок FastAPI: перевод исключений приложения в HTTP-ответы.
Единая граница ошибок для всех маршрутов.
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from app.exceptions import NotFoundError, ServiceError, ValidationError
from app.services.validation import error_messages

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "A problem happened while handling your request."


async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.errors)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = error_messages(exc.errors())
    logger.info("Bad request %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.critical(
        "Exception while handling %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ServiceError, unhandled_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
