"""HTTP middleware for Prometheus metrics instrumentation."""

import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from content_sanitizer.shared.metrics import HTTP_REQUEST_DURATION_SECONDS, HTTP_REQUESTS_TOTAL

_ID_SEGMENT = re.compile(
    r"^(?:\d+|[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12})$"
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware that records HTTP request metrics."""

    # Scrape and probe endpoints are not recorded
    EXCLUDE_PATHS = {"/metrics", "/api/v1/health"}

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if path in self.EXCLUDE_PATHS:
            return await call_next(request)

        endpoint = self._normalize_path(path)

        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        HTTP_REQUESTS_TOTAL.labels(
            method=request.method, endpoint=endpoint, status=str(response.status_code)
        ).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=request.method, endpoint=endpoint).observe(
            duration
        )

        return response

    @staticmethod
    def _normalize_path(path: str) -> str:
        """Collapse conversation/message UUIDs and numeric segments to {id}."""
        return "/".join("{id}" if _ID_SEGMENT.match(part) else part for part in path.split("/"))
