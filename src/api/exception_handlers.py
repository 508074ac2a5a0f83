"""Translation of application exceptions into HTTP problem responses.

Handlers, services and repositories raise; nothing below the API layer knows
about status codes. Bodies follow the problem-details shape:
``{"title": ..., "status": ..., "detail": ...}``.
"""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from application.mediation import ListenerFailure, NoHandlerRegistered
from domain.exceptions import NotFoundError, ValidationError

log = logging.getLogger(__name__)


def problem(status_code: int, title: str, detail: str, **extensions) -> JSONResponse:
    content = {"title": title, "status": status_code, "detail": detail}
    content.update(extensions)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return problem(status.HTTP_404_NOT_FOUND, "Not Found", exc.message)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return problem(status.HTTP_400_BAD_REQUEST, "Bad Request", exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return problem(status.HTTP_400_BAD_REQUEST, "Bad Request", "The request is malformed", errors=exc.errors())


async def listener_failure_handler(request: Request, exc: ListenerFailure) -> JSONResponse:
    log.error(f"{request.method} {request.url.path}: {exc}")
    failures = [{"listener": failure.listener, "error": f"{type(failure.error).__name__}: {failure.error}"} for failure in exc.failures]
    return problem(status.HTTP_500_INTERNAL_SERVER_ERROR, "Notification Listener Failure", str(exc), failures=failures)


async def no_handler_registered_handler(request: Request, exc: NoHandlerRegistered) -> JSONResponse:
    log.error(f"{request.method} {request.url.path}: {exc}")
    return problem(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", str(exc))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return problem(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "Internal Server Error.")


async def catch_unhandled_exceptions(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    try:
        return await call_next(request)
    except Exception as e:
        return await unhandled_exception_handler(request, e)


def configure_exception_handlers(app: FastAPI) -> None:
    """Register every exception-to-response translation on the application.

    Unexpected exceptions are translated by an HTTP middleware, which must sit
    inside CORS: call this before ``configure_middleware``.
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ListenerFailure, listener_failure_handler)
    app.add_exception_handler(NoHandlerRegistered, no_handler_registered_handler)
    app.middleware("http")(catch_unhandled_exceptions)
