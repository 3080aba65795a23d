"""Exception handlers mapping errors to the JSON error envelope.

Every failure response has the shape
``{"success": false, "error": <message>, "details": <optional>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from uniflow.domain.error import (
    BusinessRuleViolationError,
    CollaboratorError,
    DomainError,
    NotFoundError,
    ServiceUnavailableError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order; first match wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (ServiceUnavailableError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (CollaboratorError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def error_body(message: str, details=None) -> dict:
    body = {"success": False, "error": message}
    if details is not None:
        body["details"] = details
    return body


def status_for(error: DomainError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})"
        )
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")

    headers = None
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, exc.details),
        headers=headers,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request body", details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
