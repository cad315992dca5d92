from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from fastapi.middleware.cors import CORSMiddleware

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import FastAPI, Request, Response

    from vacation_manager.config import Settings

logger = logging.getLogger(__name__)


async def _log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Log every request with the caller id and its duration."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %d (%.1f ms) user=%s",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        request.headers.get("x-user-id", "-"),
    )
    return response


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure application middleware."""
    app.add_middleware(
        CORSMiddleware,  # ty: ignore[invalid-argument-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-User-Id", "X-User-Email", "X-User-Name"],
    )
    app.middleware("http")(_log_requests)
