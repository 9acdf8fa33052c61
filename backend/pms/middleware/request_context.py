"""Per-request context: a request id for log correlation and one access line per request."""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger("pms.request")

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs method, path, status and latency.

    The id is taken from ``header_name`` when the caller sends one and echoed
    back on the response under the same header.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID", user_header: Optional[str] = None):
        super().__init__(app)
        self.header_name = header_name
        self.user_header = user_header

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get(self.header_name) or uuid.uuid4().hex
        token = request_id_ctx.set(rid)
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[self.header_name] = rid
            return response
        finally:
            logger.info(
                f"{request.method} {request.url.path} -> {status_code}",
                extra={
                    "http_method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "latency_ms": round((time.perf_counter() - started) * 1000, 1),
                    "caller": request.headers.get(self.user_header) if self.user_header else None,
                },
            )
            request_id_ctx.reset(token)
