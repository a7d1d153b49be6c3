"""Global error handling.

All exceptions are converted to a standardized JSON body (see
``fanclub.core.errors.error_body``) with the matching HTTP status.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from fanclub.config import settings
from fanclub.core.errors import error_body
from fanclub.core.exceptions import FanClubError
from fanclub.repositories.base import is_unique_violation

logger = logging.getLogger(__name__)


async def handle_fanclub_error(request: Request, exc: FanClubError) -> JSONResponse:
    """Handle domain exceptions using the error catalog."""
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    if exc.http_status >= 500:
        logger.error(f"Request failed: {exc.error_code}", extra=extra)
    else:
        logger.warning(f"Request rejected: {exc.error_code}", extra=extra)

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.error_code, exc.field_errors),
    )


def _field_errors(errors: list[dict]) -> dict[str, list[str]]:
    field_errors: dict[str, list[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query")]
        field = ".".join(loc) or "general"
        if error.get("type") == "value_error" and error.get("ctx", {}).get("error"):
            msg = str(error["ctx"]["error"])
        else:
            msg = error.get("msg", "Invalid value")
        field_errors.setdefault(field, []).append(msg)
    return field_errors


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors as field-scoped 400 responses."""
    errors = exc.errors()

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = [{"loc": e.get("loc"), "type": e.get("type")} for e in errors]
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VAL_001", _field_errors(errors)),
    )


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors that escaped the service layer."""
    # Do not log str(exc): it can include SQL + bound parameters.
    log = logger.exception if settings.debug else logger.error
    log(
        f"Database integrity error on {request.url.path}",
        extra={"path": request.url.path, "method": request.method},
    )

    if is_unique_violation(exc):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error_body("DB_002"))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("DB_001")
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without exposing internal details."""
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include sensitive data).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("SYS_001"),
    )
