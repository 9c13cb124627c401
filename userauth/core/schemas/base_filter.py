from pydantic import Field

from userauth.core.schemas.base import BaseSchema

MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 1000


class BaseFilter(BaseSchema):
    page: int = Field(default=1, ge=1, le=MAX_PAGE, description="Page number (starts from 1)")
    page_size: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE, description="Items per page")
    sort: str = Field(default="asc", description="'desc' for descending id order, anything else ascending")
