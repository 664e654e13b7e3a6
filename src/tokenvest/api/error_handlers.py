"""Global exception handlers mapping registry errors to HTTP responses.

Response shape:
    {"error": {"code": "<ERROR_CODE>", "message": "<human readable>"}}
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tokenvest.core.exceptions import (
    ConfigMissingError,
    InvalidAmountError,
    InvalidStatusError,
    NotAuthorizedError,
    NotFoundError,
    StoreError,
    TokenVestError,
)

log = structlog.get_logger(__name__)

# (status code, error code) per exception type; first match wins
ERROR_MAP: list[tuple[type[TokenVestError], int, str]] = [
    (InvalidAmountError, status.HTTP_400_BAD_REQUEST, "INVALID_AMOUNT"),
    (InvalidStatusError, status.HTTP_400_BAD_REQUEST, "INVALID_STATUS"),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN, "NOT_AUTHORIZED"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (ConfigMissingError, status.HTTP_409_CONFLICT, "CONFIG_MISSING"),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE, "STORE_ERROR"),
]


def resolve_error(exc: TokenVestError) -> tuple[int, str]:
    """Map an exception to (HTTP status, error code)."""
    for error_type, http_status, code in ERROR_MAP:
        if isinstance(exc, error_type):
            return http_status, code
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register registry error handlers on the FastAPI app."""

    @app.exception_handler(TokenVestError)
    async def tokenvest_error_handler(request: Request, exc: TokenVestError) -> JSONResponse:
        http_status, code = resolve_error(exc)
        if http_status >= 500:
            log.error("request_failed", path=request.url.path, error_code=code, error=str(exc))
        else:
            log.info("request_rejected", path=request.url.path, error_code=code)
        return JSONResponse(
            status_code=http_status,
            content={"error": {"code": code, "message": str(exc)}},
        )
