from typing import Optional

from userauth.core.schemas import BaseSchema


class TokenPayload(BaseSchema):
    """Claims carried by an access token."""
    sub: str
    email: str
    role: str
    jti: str
    iss: Optional[str] = None
    aud: Optional[str] = None
    iat: int
    exp: int
