"""Exception handlers: every error leaves the API as ``{"error": <message>}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from phone_catalog.domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    FieldValidationError,
    InvalidIdentifierError,
)

logger = logging.getLogger(__name__)

_TYPE_MESSAGES = {
    "missing": "{field} is required",
    "string_type": "{field} must be a non-empty string",
    "string_too_short": "{field} must be a non-empty string",
    "bool_type": "{field} must be a boolean",
    "int_type": "{field} must be an integer",
    "int_parsing": "{field} must be an integer",
}


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first Pydantic error into a short, field-oriented message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    error_type = first.get("type", "")
    loc = [str(part) for part in first.get("loc", ())]

    if error_type == "json_invalid":
        return "Malformed JSON body"
    if loc == ["body"]:
        if error_type == "missing":
            return "Request body is required"
        return "Request body must be a JSON object"

    field = loc[-1] if loc else "value"
    template = _TYPE_MESSAGES.get(error_type)
    if template:
        return template.format(field=field)
    return f"{field}: {first.get('msg', 'invalid value')}"


async def _not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _invalid_id_handler(request: Request, exc: InvalidIdentifierError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _field_validation_handler(request: Request, exc: FieldValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))


async def _authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    return error_response(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        headers={"WWW-Authenticate": exc.scheme},
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EntityNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidIdentifierError, _invalid_id_handler)
    app.add_exception_handler(FieldValidationError, _field_validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(AuthenticationError, _authentication_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
