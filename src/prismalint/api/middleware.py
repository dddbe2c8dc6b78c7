"""HTTP middleware for the lint API."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

MEGABYTE = 1024 * 1024

# Schemas of large monorepos run to a few MB; nothing else posts a body.
SCHEMA_BODY_LIMIT = 5 * MEGABYTE
DEFAULT_BODY_LIMIT = 1 * MEGABYTE
_SCHEMA_ENDPOINTS = ("/lint", "/fix")


def body_limit_for(path: str) -> int:
    """Maximum accepted request body in bytes for *path*."""
    return SCHEMA_BODY_LIMIT if path.endswith(_SCHEMA_ENDPOINTS) else DEFAULT_BODY_LIMIT


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length", "")
    return int(raw) if raw.isdigit() else None


def _payload_too_large(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={"detail": f"Request body too large (max {limit // MEGABYTE} MB)"},
    )


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Report handler time in milliseconds as ``X-Request-Duration-Ms``."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.monotonic()
        response = await call_next(request)
        elapsed_ms = (time.monotonic() - started) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{elapsed_ms:.1f}"
        return response


class RequestBodyLimitMiddleware(BaseHTTPMiddleware):
    """Answer 413 for bodies larger than :func:`body_limit_for` allows.

    A declared ``Content-Length`` over the limit is refused up front.
    Otherwise the body is read chunk by chunk and refused as soon as the
    running total passes the limit, which also covers chunked uploads.
    The bytes read are handed on via ``request._body``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        limit = body_limit_for(request.url.path)

        declared = _declared_length(request)
        if declared is not None and declared > limit:
            return _payload_too_large(limit)

        if request.method in ("POST", "PUT", "PATCH"):
            body = bytearray()
            async for chunk in request.stream():
                body.extend(chunk)
                if len(body) > limit:
                    return _payload_too_large(limit)
            request._body = bytes(body)  # noqa: SLF001

        return await call_next(request)
