"""Error Handlers: global exception handlers producing the flat error envelope.

Invariants:
    - RelayError -> its own status and {error, message, details?}
    - details only outside production (settings.is_production)
    - RequestValidationError -> 400 with a field summary
    - Unmatched route or method -> 404 "Not found"
    - RateLimitExceeded -> 429 before any handler runs
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - Four-layer handler: domain (RelayError), validation (Pydantic), routing
      (Starlette HTTPException), catch-all (Exception)
    - Rate-limit handler is sync: SlowAPIMiddleware invokes it directly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from fieldroutes_relay.core.errors import RateLimitedError, RelayError

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = {
    "error": "Not found",
    "message": "The requested endpoint was not found",
}
INTERNAL_ERROR_BODY = {
    "error": "Internal server error",
    "message": "An unexpected error occurred",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_relay_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_rate_limit_handler(app)
    _register_generic_error_handler(app)


def _register_relay_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError):
        """Serialize every relay error into its envelope."""
        include_details = not request.app.state.settings.is_production
        logger.info(
            f"{exc.error}: {exc.message}",
            extra={
                "error_code": exc.error,
                "status_code": exc.http_status,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(include_details=include_details),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "message": _summarize_validation_errors(exc),
            },
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY,
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "HTTP error", "message": str(exc.detail)},
        )


def _register_rate_limit_handler(app: FastAPI) -> None:

    def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(
            f"Rate limit exceeded: {exc.detail}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            content=RateLimitedError().to_response(),
        )

    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """'query.limit: Input should be a valid integer' style summary."""
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
