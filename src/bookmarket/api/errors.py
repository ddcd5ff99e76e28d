"""Translate domain exceptions into JSON error responses.

Every error body has the shape ``{"error": "<message>"}``; validation errors
also carry the per-field ``details`` they were raised with.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from bookmarket.exceptions import InvalidTransition, OutOfStock, Unauthorized

logger = structlog.get_logger(__name__)


def first_message(messages) -> str:
    """Pull one human-readable message out of Protean's message structures."""
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            return first_message(value)
    if isinstance(messages, (list, tuple)) and messages:
        return first_message(messages[0])
    return str(messages)


def _error_response(status_code: int, exc: Exception, with_details: bool = False) -> JSONResponse:
    messages = getattr(exc, "messages", str(exc))
    body = {"error": first_message(messages)}
    if with_details and isinstance(messages, dict):
        body["details"] = messages
    return JSONResponse(status_code=status_code, content=body)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(400, exc, with_details=True)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "request"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    message = next(iter(details.items()), ("request", ["Invalid request"]))
    return JSONResponse(status_code=400, content={"error": f"{message[0]}: {message[1][0]}", "details": details})


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _error_response(404, exc)


async def _conflict(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(409, exc)


async def _unauthorized(request: Request, exc: Unauthorized) -> JSONResponse:
    return _error_response(401, exc)


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(InvalidTransition, _conflict)
    app.add_exception_handler(OutOfStock, _conflict)
    app.add_exception_handler(ExpectedVersionError, _conflict)
    app.add_exception_handler(Unauthorized, _unauthorized)
    app.add_exception_handler(Exception, _unexpected)
