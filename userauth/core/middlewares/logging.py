import logging
import time
from typing import Callable

from fastapi import Request

logger = logging.getLogger("userauth.requests")


async def request_logging_middleware(request: Request, call_next: Callable):
    """Log every request with its status and duration."""
    start_time = time.perf_counter()

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    # Path only; query strings may carry search terms
    logger.info(f"[{request.method}] {request.url.path} - {response.status_code} - {duration:.3f}s")

    return response
