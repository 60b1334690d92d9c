"""Request Observer - one HTTP middleware that logs every inbound request.

Invariants:
    - Logs method, path and caller address before the route runs
    - Logs status and duration after it, including for failing requests
    - Never alters the request, the response, or control flow
"""

import logging
import time

from fastapi import Request, Response

logger = logging.getLogger(__name__)


def _client_address(request: Request) -> str | None:
    return request.client.host if request.client else None


async def log_requests(request: Request, call_next) -> Response:
    """HTTP middleware; register with app.middleware("http")."""
    extra = {
        "method": request.method,
        "path": request.url.path,
        "client": _client_address(request),
    }
    logger.info(
        f"{request.method} {request.url.path} from {extra['client']}",
        extra=extra,
    )
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.error(
            f"{request.method} {request.url.path} raised",
            extra={**extra, "status_code": 500, "duration_ms": _elapsed_ms(started)},
        )
        raise
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            **extra,
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(started),
        },
    )
    return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
