"""
Commerce Backend — Request ID Middleware
=========================================

What:  Assigns an ID to each incoming request and echoes it in the response.
How:   Accepts a client-sent X-Request-ID or generates a short UUID, stores it
       in a ContextVar for loggers and error handlers, returns it in a header.
When:  First middleware in the chain.

Error envelopes include the same ID, so a client can quote it and the
matching server log lines can be found.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use X-Request-ID from the client if present
        2. Otherwise generate an 8-character ID
        3. Store in ContextVar and request.state
        4. Add to response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
