from .headers import security_headers_middleware
from .logging import request_logging_middleware

__all__ = ["security_headers_middleware", "request_logging_middleware"]
