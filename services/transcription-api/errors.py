"""Maps service errors to HTTP responses with an ``{"error": ...}`` body."""

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from scribe_common import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    NotFoundError,
    QuotaError,
    ScribeError,
    ValidationError,
    setup_logging,
)
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = setup_logging()

ERROR_STATUS: dict[type[ScribeError], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    QuotaError: 429,
    ConfigurationError: 500,
}


def to_http_exception(
    error: ScribeError, status_map: dict[type[ScribeError], int] = ERROR_STATUS
) -> HTTPException:
    """Builds an HTTPException for a service error; unmapped errors become 500."""
    for error_type, status_code in status_map.items():
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=500, detail=error.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {problems}"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
