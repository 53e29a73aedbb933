"""FastAPI exception handlers for domain errors.

Translates domain errors to HTTP responses with a structured error format.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_search.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "CONFLICT": status.HTTP_409_CONFLICT,
    "DUPLICATE_ID": status.HTTP_409_CONFLICT,
}


def _request_extra(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with HTTP status code mapping.

    - VALIDATION_ERROR → 422 Unprocessable Entity
    - CONFLICT, DUPLICATE_ID → 409 Conflict
    - Other → 400 Bad Request
    """
    error_dict = exc.to_dict()

    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "context": exc.context,
            **_request_extra(request),
        },
    )

    response_content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }

    # Field-level errors (ValidationError)
    if "errors" in error_dict:
        response_content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=response_content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Examples:
        - product_id=abc (not an integer)
        - sizes=x
        - Missing required product_id
    """
    errors = []

    for error in exc.errors():
        # Drop 'body' and 'query' prefixes from the location
        field_path = ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))

        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_extra(request)},
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError raised by domain helpers or mappers."""
    logger.info(
        "Value error",
        extra={"error_message": str(exc), **_request_extra(request)},
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": str(exc),
            "code": "INVALID_VALUE",
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors.

    Always logged with full traceback for investigation.
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_extra(request),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Call once during app initialization.
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
