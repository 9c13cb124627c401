from userauth.core.schemas.base import BaseSchema


class MessageResponse(BaseSchema):
    message: str
