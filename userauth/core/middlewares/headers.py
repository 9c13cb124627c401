from fastapi import Request
from typing import Callable


async def security_headers_middleware(request: Request, call_next: Callable):
    """Add security headers to all responses"""
    response = await call_next(request)

    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "no-referrer"
    # Token responses must never be cached
    response.headers["Cache-Control"] = "no-store"

    return response
