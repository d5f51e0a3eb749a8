"""Error Handlers: map error kinds to HTTP responses.

Invariants:
    - CustomerServiceError -> its to_response() envelope, status chosen from its category
    - RequestValidationError -> 400 with field-level details
    - Anything else -> 500 with a fixed message
    - AuthenticationError responses carry WWW-Authenticate: Bearer

Design Decisions:
    - Status codes live here only; core errors carry an abstract ErrorCategory
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from customer_service.core.errors import (
    CustomerServiceError, ErrorCategory, ErrorSeverity,
)

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY: dict[ErrorCategory, int] = {
    ErrorCategory.CONFIGURATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorCategory.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCategory.STORAGE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCategory.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomerServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def service_error_handler(request: Request, exc: CustomerServiceError):
    status_code = STATUS_BY_CATEGORY.get(
        exc.category, status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    log = logger.error if status_code >= 500 else logger.warning
    log(exc.message, extra={"error_code": exc.code, "path": request.url.path})
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if exc.category == ErrorCategory.AUTHENTICATION else None
    )
    return JSONResponse(
        status_code=status_code, content=exc.to_response(), headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Invalid request body: {details}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
