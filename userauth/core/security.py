import logging
from typing import Optional
from typing_extensions import Annotated

from fastapi import Depends, status, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from userauth.api.v1.schemas import TokenPayload
from userauth.core.config import settings
from userauth.core.helpers import TokenIssuer, get_token_issuer
from userauth.core.models import InvalidTokenError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# Validate JWT token
async def get_token_payload(
        credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
        token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> TokenPayload:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not credentials:
        raise credentials_exception

    try:
        payload = token_issuer.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning(e.message)
        raise credentials_exception

    return TokenPayload.model_validate(payload)


async def get_current_admin_user(
    current_user: Annotated[TokenPayload, Depends(get_token_payload)]
) -> TokenPayload:
    if current_user.role == settings.ADMIN_ROLE:
        return current_user

    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Not enough privileges to perform this action."
    )
