from .users import UserBase, UserCreate, UserRead, UserFilter, UserListResponse, get_user_filter
from .auth import SignInRequest, RegisterRequest, SignInResponse
from .token import TokenPayload

__all__ = [
    "RegisterRequest",
    "SignInRequest",
    "SignInResponse",
    "TokenPayload",
    "UserBase",
    "UserCreate",
    "UserFilter",
    "UserListResponse",
    "UserRead",
    "get_user_filter",
]
