"""
Central error mapping

Services raise domain exceptions; this module is the only place that
turns them into HTTP responses.

    NotFoundError          -> 404
    ConflictError          -> 409
    ValidationFailedError  -> 400 {success, message, errors: {field: [..]}}
    RequestValidationError -> 400 (same body, e.g. pageSize=500 or price="abc")
    DomainError            -> 400
    anything else          -> 500, details only when API_DEBUG
"""
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from commerce_api.core.config import Settings
from commerce_api.domain.common import ErrorResponse, ValidationErrorResponse
from commerce_api.domain.exceptions import ConflictError, DomainError, NotFoundError, ValidationFailedError

logger = logging.getLogger(__name__)

# loc prefixes FastAPI adds in front of the field name
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _error_response(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


def _validation_response(errors: Dict[str, List[str]]) -> JSONResponse:
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(by_alias=True))


def request_errors_by_field(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Group FastAPI/pydantic parsing errors as field -> messages"""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PREFIXES]
        field = ".".join(parts) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Attach the domain -> HTTP mapping to app"""

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning(f"Resource not found: {exc.message}")
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(ConflictError)
    async def conflict_handler(request: Request, exc: ConflictError):
        logger.warning(f"Conflict occurred: {exc.message}")
        return _error_response(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        logger.warning(f"Validation failed on {request.url.path}: {exc.errors}")
        return _validation_response(exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = request_errors_by_field(exc)
        logger.warning(f"Invalid request on {request.url.path}: {errors}")
        return _validation_response(errors)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.warning(f"Domain error: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        details = str(exc) if settings.API_DEBUG else None
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An unexpected error occurred",
            details,
        )
