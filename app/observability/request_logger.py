"""
Request logging middleware: one line per incoming request, plus the body for writes
"""

import json
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger()

BODY_METHODS = ("POST", "PUT")


def original_url(request: Request) -> str:
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return url


def render_body(raw: bytes) -> str:
    """Pretty-print a JSON body; anything unparseable is logged as text."""
    try:
        return json.dumps(json.loads(raw), indent=2, ensure_ascii=False)
    except ValueError:
        return raw.decode("utf-8", errors="replace")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        url = original_url(request)
        log.info("request", method=request.method, url=url)

        if request.method in BODY_METHODS:
            raw = await request.body()
            log.info("request body", method=request.method, url=url, body=render_body(raw))

        start = time.monotonic()
        response = await call_next(request)
        duration_ms = int((time.monotonic() - start) * 1000)

        log.info(
            "response",
            method=request.method,
            url=url,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )
        response.headers["X-Request-ID"] = request_id
        return response
