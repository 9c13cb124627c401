from .token_helper import (
    JWT_ALGORITHM,
    TokenIssuer,
    create_access_token,
    get_token_issuer,
    verify_jwt_token,
)
from .filter_helper import apply_filters_and_sorting, paginate

__all__ = [
    "JWT_ALGORITHM",
    "TokenIssuer",
    "apply_filters_and_sorting",
    "create_access_token",
    "get_token_issuer",
    "paginate",
    "verify_jwt_token",
]
