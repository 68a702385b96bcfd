# hostel_ops/core/middleware.py
"""
Core middleware registration for the FastAPI application.

This module provides request tracking, timing and error logging middleware.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostel_ops.core.constants import HEADER_PROCESS_TIME, HEADER_REQUEST_ID
from hostel_ops.core.logging import (
    bind_request_context,
    get_logger,
    reset_request_context,
)

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each incoming request.

    The request ID is:
    - Stored in request.state.request_id
    - Bound to the logging context for the duration of the request
    - Added to response headers as X-Request-ID
    """

    def __init__(self, app: ASGIApp, header_name: str = HEADER_REQUEST_ID):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Reuse an upstream request ID when a proxy already assigned one
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        tokens = bind_request_context(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_context(tokens)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers[HEADER_PROCESS_TIME] = f"{process_time:.4f}"

        logger.info(
            "Request completed",
            request_id=getattr(request.state, "request_id", None),
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=round(process_time, 4),
        )
        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs errors and exceptions during request processing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request processing failed",
                request_id=getattr(request.state, "request_id", None),
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
                exc_info=True,
            )
            raise

        if response.status_code >= 400:
            logger.warning(
                "Request returned error status",
                request_id=getattr(request.state, "request_id", None),
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
            )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register all core middlewares to the FastAPI application.

    Middlewares are registered in reverse order of execution (LIFO):
    the request ID is assigned first, then timing, then error logging.
    """
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "ErrorLoggingMiddleware",
    "register_middlewares",
]
