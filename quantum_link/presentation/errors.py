"""
Exception → response mapping.

Expected failures leave as {"error": <message>, "kind": <kind>} with a
fixed status per kind. Anything else is logged with its traceback and
leaves as a generic INTERNAL error; no internal detail reaches the caller.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quantum_link.domain.exceptions import ErrorKind, QuantumLinkError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SELF_TARGET: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

KIND_BY_STATUS = {
    status.HTTP_401_UNAUTHORIZED: ErrorKind.UNAUTHENTICATED,
    status.HTTP_403_FORBIDDEN: ErrorKind.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorKind.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorKind.CONFLICT,
}

INTERNAL_MESSAGE = "Internal server error"


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content={"error": message, "kind": kind.value},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(QuantumLinkError)
    async def domain_exception_handler(request: Request, exc: QuantumLinkError):
        logger.info(f"[{exc.kind.value}] {request.method} {request.url.path}: {exc.message}")
        return error_response(exc.kind, exc.message)

    # Validation error handler - malformed bodies and query strings
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"[validation] {request.method} {request.url.path}: {exc.errors()}")
        return error_response(ErrorKind.VALIDATION, "Invalid request body")

    # Routing-level errors (unknown path, wrong method)
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = KIND_BY_STATUS.get(exc.status_code, ErrorKind.VALIDATION)
        if exc.status_code >= 500:
            kind = ErrorKind.INTERNAL
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "kind": kind.value},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[internal] {request.method} {request.url.path}: {type(exc).__name__}")
        return error_response(ErrorKind.INTERNAL, INTERNAL_MESSAGE)
