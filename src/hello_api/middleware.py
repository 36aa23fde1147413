"""Reusable FastAPI middleware components."""

from __future__ import annotations

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from hello_api.logging import get_logger

_logger = get_logger("request")

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each HTTP request with timing and a correlation id."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER, str(uuid.uuid4()))
        client_host = request.client.host if request.client else "-"
        _logger.info(
            "request.start id=%s method=%s path=%s client=%s",
            request_id,
            request.method,
            request.url.path,
            client_host,
        )
        try:
            response = await call_next(request)
        except Exception:
            _logger.exception(
                "request.error id=%s method=%s path=%s duration_ms=%d",
                request_id,
                request.method,
                request.url.path,
                _elapsed_ms(start),
            )
            raise

        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        _logger.info(
            "request.complete id=%s method=%s path=%s status=%s duration_ms=%d",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            _elapsed_ms(start),
        )
        return response


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
