from typing import List, Optional

from fastapi import Query
from pydantic import Field

from userauth.core.config import settings
from userauth.core.schemas import BaseSchema, BaseFilter, MAX_PAGE, MAX_PAGE_SIZE


class UserBase(BaseSchema):
    email: str


class UserCreate(UserBase):
    password: str
    role: str = settings.DEFAULT_ROLE


class UserRead(UserBase):
    """Public view of a user. The password is never part of it."""
    id: int
    role: str


class UserFilter(BaseFilter):
    role_filter: Optional[str] = Field(default=settings.DEFAULT_ROLE, description="Exact role to match; empty for all")
    search: str = Field(default="", description="Case-insensitive substring of the email")


class UserListResponse(BaseSchema):
    items: List[UserRead]
    total_count: int
    total_pages: int


def get_user_filter(
        role_filter: Optional[str] = Query(settings.DEFAULT_ROLE, alias="roleFilter"),
        search: str = Query(""),
        sort: str = Query("asc", description="asc or desc"),
        page: int = Query(1, ge=1, le=MAX_PAGE),
        page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> UserFilter:
    return UserFilter(
        role_filter=role_filter,
        search=search,
        sort=sort,
        page=page,
        page_size=page_size,
    )
