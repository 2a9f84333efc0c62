"""Maps errors raised while serving a request onto the JSON error body."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stayfinder.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODE_MAP: dict[str, int] = {
    "VALIDATION_ERROR": 422,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}

# Location segments FastAPI prepends that mean nothing to the client
_LOCATION_PREFIXES = ("body", "query", "path")


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = STATUS_CODE_MAP.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    logger.info(
        "Request rejected",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
        },
    )

    body = exc.to_dict()
    content = {"detail": body["message"], "code": body["code"]}
    if "errors" in body:
        content["errors"] = body["errors"]
    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Query or body values FastAPI could not coerce, e.g. ``page=0`` or ``sort=cheapest``."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in _LOCATION_PREFIXES),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]
    logger.info(
        "Request validation error",
        extra={"errors": errors, "path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
