"""
Promptopia Backend — Request ID Middleware
============================================

What:  Assigns a correlation ID to each request and returns it in X-Request-ID.
Why:   Every log line and error body from one request shares the same ID,
       so a user-reported failure can be traced straight to its log entries.
How:   Reuses the client's X-Request-ID when present, otherwise generates
       a short UUID; stores it in a ContextVar and on request.state.
When:  First middleware in the chain.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header if it sent one
        2. Otherwise generate the first 8 characters of a UUID4
        3. Expose it via request_id_var and request.state.request_id
        4. Echo it in the X-Request-ID response header
    """

    HEADER = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(self.HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[self.HEADER] = rid
        return response
