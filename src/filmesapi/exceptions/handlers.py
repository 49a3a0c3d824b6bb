from logging import getLogger

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmesapi.exceptions.base import AppError, NotFoundError
from filmesapi.exceptions.validation import FieldViolation, ValidationError

logger = getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"

# Request sections FastAPI prefixes onto error locations
_REQUEST_SECTIONS = {"body", "query", "path", "header", "cookie"}


def violations_from_request(exc: RequestValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _REQUEST_SECTIONS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        violations.append(FieldViolation(field=field, message=error.get("msg", "")))
    return violations


def _problem_response(exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_problem(),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(NotFoundError)
    async def not_found_handler(_: Request, exc: NotFoundError):
        logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return Response(status_code=exc.status_code)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(_: Request, exc: ValidationError):
        logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return _problem_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_: Request, exc: RequestValidationError):
        error = ValidationError(violations_from_request(exc))
        logger.warning(f" {error.status_code} Error: {error.detail}")
        return _problem_response(error)

    @app.exception_handler(AppError)
    async def app_error_handler(_: Request, exc: AppError):
        logger.warning(f" {exc.status_code} Error: {exc.detail}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred."},
        )
