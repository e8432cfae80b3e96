"""API middleware for request logging."""
from __future__ import annotations
import time
from uuid import uuid4
import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and tags it with an ``X-Request-ID``."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        structlog.contextvars.bind_contextvars(request_id=request_id)
        start = time.monotonic()
        try:
            response = await call_next(request)
            duration = int((time.monotonic() - start) * 1000)
            logger.info("request", method=request.method, path=request.url.path,
                        status=response.status_code, duration_ms=duration)
            response.headers["X-Request-ID"] = request_id
            return response
        except Exception as e:
            duration = int((time.monotonic() - start) * 1000)
            logger.error("request_error", method=request.method, path=request.url.path,
                         error=str(e), duration_ms=duration)
            return JSONResponse(status_code=500, content={"detail": "Internal server error"},
                                headers={"X-Request-ID": request_id})
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
