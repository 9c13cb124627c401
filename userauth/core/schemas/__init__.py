from userauth.core.schemas.base import BaseSchema
from userauth.core.schemas.base_filter import BaseFilter, MAX_PAGE, MAX_PAGE_SIZE
from userauth.core.schemas.api_response import MessageResponse

__all__ = ["BaseSchema", "BaseFilter", "MAX_PAGE", "MAX_PAGE_SIZE", "MessageResponse"]
