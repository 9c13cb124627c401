from .base import Base
from .exceptions import (
    AuthError,
    ConfigurationError,
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    RecordConflictError,
)

__all__ = [
    "AuthError",
    "Base",
    "ConfigurationError",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "RecordConflictError",
]
