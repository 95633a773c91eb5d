"""Prometheus instrumentation for HTTP requests."""

from __future__ import annotations

import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from voxguard.telemetry import observe_request

_UNTRACKED_PATHS = frozenset({"/metrics"})


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Record count and latency of every request except metric scrapes."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in _UNTRACKED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            # The route is only resolved once the router has run.
            observe_request(
                request.method,
                self._route_label(request),
                status_code,
                time.perf_counter() - started,
            )

        response.headers["X-Process-Time-Ms"] = f"{(time.perf_counter() - started) * 1000:.2f}"
        return response

    @staticmethod
    def _route_label(request: Request) -> str:
        """Prefer the route template so path parameters don't explode label cardinality."""

        route: Any = request.scope.get("route")
        template = getattr(route, "path", None)
        return template or request.url.path
