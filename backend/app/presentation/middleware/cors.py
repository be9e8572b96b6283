"""Permissive CORS headers and pre-flight handling for every request.

Starlette's CORSMiddleware only decorates requests that carry an ``Origin``
header; browsers and scripts hitting this API expect the headers on every
response, and a bare ``OPTIONS`` on any path must succeed.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Answers OPTIONS with an empty 200 and stamps JSON + CORS headers on responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200, media_type="application/json")
        else:
            response = await call_next(request)

        response.headers.setdefault("Content-Type", "application/json")
        response.headers.update(CORS_HEADERS)
        return response
