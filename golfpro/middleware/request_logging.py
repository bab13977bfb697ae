"""Per-request access logging."""
import logging
import time
from itertools import count

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("golfpro.access")

_request_ids = count(1)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request with its status and duration.

    Search requests also log their query string so slow ZIP lookups can be
    traced back to the input. Failures are logged and re-raised for the
    exception handlers in ``golfpro.main``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = next(_request_ids)
        started = time.perf_counter()
        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }
        if request.url.path.startswith("/api/search") and request.url.query:
            fields["query"] = request.url.query

        try:
            response = await call_next(request)
        except Exception as exc:
            fields["duration_ms"] = _elapsed_ms(started)
            fields["error_type"] = type(exc).__name__
            logger.error(
                f"{request.method} {request.url.path} failed",
                exc_info=True,
                extra=fields
            )
            raise

        fields["status_code"] = response.status_code
        fields["duration_ms"] = _elapsed_ms(started)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra=fields
        )
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
