"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from presentation_service.infra.config.logging_config import get_logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id, path and method to the structlog context.

    The binding is scoped to the request, so nothing leaks into the next one.
    Logs request start/end and echoes the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get("x-request-id") or str(uuid4())
        logger = get_logger("http")

        with structlog.contextvars.bound_contextvars(
            request_id=request_id, path=str(request.url.path), method=request.method
        ):
            started = time.perf_counter()
            logger.info(
                "request.start",
                client_ip=request.client.host if request.client else None,
            )
            try:
                response = await call_next(request)
            except Exception as exc:  # pragma: no cover
                logger.exception("request.error", error=str(exc))
                raise
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request.end",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
