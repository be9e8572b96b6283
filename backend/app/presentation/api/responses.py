"""Error-to-response mapping for the clients API.

Every failure leaves the app as ``{"message": <description>}``:

    NotFoundError                            → 404
    ParseError / StorageError / CorruptionError → 500
    routing miss (Starlette HTTPException)   → its own status (404, 405)
    anything unexpected                      → 500
"""

import logging
from collections.abc import Mapping

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import CorruptionError, NotFoundError, ParseError, StorageError
from app.presentation.middleware.cors import CORS_HEADERS

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    message: str,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the uniform JSON error body."""
    return JSONResponse(
        status_code=status_code,
        content={"message": message},
        headers=dict(headers) if headers else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers that turn request failures into JSON error responses."""

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ParseError)
    async def handle_parse_error(request: Request, exc: ParseError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(CorruptionError)
    async def handle_corruption_error(request: Request, exc: CorruptionError):
        logger.error("%s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), exc.headers)

    # Runs in ServerErrorMiddleware, outside PermissiveCORSMiddleware
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Internal Server Error",
            CORS_HEADERS,
        )
