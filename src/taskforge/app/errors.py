"""Typed application errors and the central error-response pipeline.

Every failure raised while serving a request ends up in one of the handlers
registered by :func:`register_exception_handlers`, which renders a single
:class:`~taskforge.app.schemas.system.ErrorResponse` document. Nothing below
this module formats an HTTP response for an error.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import NO_REQUEST_ID, REQUEST_ID_HEADER, get_request_id
from .schemas.system import ErrorResponse, FieldErrorDetail

DEFAULT_SERVICE_NAME = "TaskForge"

_PARAMETER_LOCATIONS = frozenset({"path", "query", "header", "cookie"})
_WARNING_STATUSES = frozenset(
    {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN, status.HTTP_409_CONFLICT}
)


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Application error."

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ApplicationError):
    """A business rule rejected the request."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request."


class UnauthorizedError(ApplicationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."


class ForbiddenError(ApplicationError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied."


class NotFoundError(ApplicationError):
    """Error representing missing resources."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class ConflictError(ApplicationError):
    """A unique field collides with an already persisted value."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists."


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _log_level_for(status_code: int) -> int:
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return logging.ERROR
    if status_code in _WARNING_STATUSES:
        return logging.WARNING
    return logging.DEBUG


def _field_name(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _PARAMETER_LOCATIONS | {"body"}:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def _rejected_value(error: dict[str, Any]) -> str | None:
    if error.get("type") == "missing":
        return None
    value = error.get("input")
    if value is None:
        return None
    return str(value)


def field_errors_from_validation(errors: Iterable[dict[str, Any]]) -> list[FieldErrorDetail]:
    """Flatten pydantic error dicts into ``{field, rejectedValue, message}`` records."""

    return [
        FieldErrorDetail(
            field=_field_name(error.get("loc", ())),
            rejected_value=_rejected_value(error),
            message=str(error.get("msg", "Invalid value")),
        )
        for error in errors
    ]


class ErrorResponseFactory:
    """Build and log the structured body for an intercepted failure."""

    def __init__(self, *, service_name: str, logger: logging.Logger) -> None:
        self._service_name = service_name
        self._logger = logger

    def build(
        self,
        request: Request,
        *,
        status_code: int,
        message: str,
        field_errors: list[FieldErrorDetail] | None = None,
        headers: dict[str, str] | None = None,
        exc_info: BaseException | None = None,
    ) -> JSONResponse:
        trace_id = str(uuid.uuid4())
        request_id = getattr(request.state, "request_id", None) or get_request_id()
        if request_id == NO_REQUEST_ID:
            request_id = None
        body = ErrorResponse(
            timestamp=datetime.now(timezone.utc),
            status=status_code,
            error=_reason_phrase(status_code),
            message=message,
            path=request.url.path,
            trace_id=trace_id,
            service=self._service_name,
            errors=field_errors,
            request_id=request_id,
        )

        self._logger.log(
            _log_level_for(status_code),
            "Error (%s): %s %s - %s",
            trace_id,
            status_code,
            body.error,
            message,
            extra={
                "trace_id": trace_id,
                "status_code": status_code,
                "path": body.path,
                "method": request.method,
            },
            exc_info=exc_info,
        )
        if field_errors:
            self._logger.debug(
                "Field errors for %s: %s",
                trace_id,
                [item.model_dump(by_alias=True) for item in field_errors],
            )

        response = JSONResponse(
            status_code=status_code,
            content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        if headers:
            response.headers.update(headers)
        if request_id:
            response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


def _validation_message(errors: Sequence[dict[str, Any]]) -> str:
    if any(error.get("type") == "json_invalid" for error in errors):
        return "Malformed JSON request"
    if all((error.get("loc") or ("body",))[0] == "body" for error in errors):
        return "Validation failed"
    return "Constraint violation"


def register_exception_handlers(
    app: FastAPI,
    *,
    service_name: str = DEFAULT_SERVICE_NAME,
    logger: logging.Logger | None = None,
) -> ErrorResponseFactory:
    """Install the handlers that translate every failure into an ``ErrorResponse``."""

    factory = ErrorResponseFactory(
        service_name=service_name,
        logger=logger or logging.getLogger(__name__),
    )

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = list(exc.errors())
        message = _validation_message(errors)
        field_errors = None
        if message != "Malformed JSON request":
            field_errors = field_errors_from_validation(errors)
        return factory.build(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            field_errors=field_errors,
        )

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        return factory.build(request, status_code=exc.status_code, message=exc.message)

    @app.exception_handler(IntegrityError)
    async def _handle_integrity_error(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        return factory.build(
            request,
            status_code=status.HTTP_409_CONFLICT,
            message="Database error",
            exc_info=exc,
        )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        if isinstance(exc.detail, str) and exc.detail:
            message = exc.detail
        else:
            message = _reason_phrase(exc.status_code)
        return factory.build(
            request,
            status_code=exc.status_code,
            message=message,
            headers=exc.headers or None,
        )

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        return factory.build(
            request,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="Internal server error",
            exc_info=exc,
        )

    return factory


__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ConflictError",
    "ErrorResponseFactory",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "field_errors_from_validation",
    "register_exception_handlers",
]
