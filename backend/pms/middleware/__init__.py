"""HTTP middleware."""

from pms.middleware.request_context import RequestContextMiddleware, get_request_id

__all__ = ["RequestContextMiddleware", "get_request_id"]
