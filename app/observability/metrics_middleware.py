"""
Per-request Prometheus counter
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.observability.metrics import REQUEST_TOTAL

SKIP_PATHS = ("/metrics", "/health")


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        response = await call_next(request)

        # route templates keep the label set bounded (/api/todos/{todo_id}, not one per id)
        route = request.scope.get("route")
        path = getattr(route, "path", request.url.path) if route else "unmatched"
        REQUEST_TOTAL.labels(
            method=request.method, path=path, status_code=str(response.status_code)
        ).inc()
        return response
