"""
Commerce Backend — Request Logging Middleware
==============================================

What:  One access-log line per HTTP request with status and duration.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP. Level follows the status class.
When:  After RequestIDMiddleware (uses request ID for correlation).

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies (passwords travel in user payloads)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("commerce.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Log levels:
        5xx → ERROR
        4xx → WARNING (404 on an unknown id, 409 on low stock, ...)
        2xx/3xx → INFO
    """

    # Health probes
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
