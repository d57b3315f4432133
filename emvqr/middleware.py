"""HTTP middleware logging each request with latency and status."""
from __future__ import annotations

import logging
import time
import uuid
from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from .monitoring import observe_request

logger = logging.getLogger("emvqr.http")

REQUEST_ID_HEADER = "X-Request-ID"


def route_path(request: Request) -> str:
    """Templated route path once routing has run, raw path otherwise."""

    route = request.scope.get("route")
    return route.path if route else request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its id, route, status and latency."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        start = time.perf_counter()
        log_extra = {
            "request_id": request_id,
            "method": request.method,
            "client": request.client.host if request.client else None,
        }
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            path = route_path(request)
            logger.exception("request failed", extra={**log_extra, "path": path, "duration_ms": round(duration_ms, 2)})
            observe_request(request.method, path, 500, duration_ms)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        path = route_path(request)
        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            "request completed",
            extra={**log_extra, "path": path, "status_code": response.status_code, "duration_ms": round(duration_ms, 2)},
        )
        observe_request(request.method, path, response.status_code, duration_ms)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
