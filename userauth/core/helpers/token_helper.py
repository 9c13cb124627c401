from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict, Any, Optional
from uuid import uuid4

from jose import jwt, JWTError

from userauth.core.config import settings
from userauth.core.models import ConfigurationError, InvalidTokenError


# --------------
# CONSTANTS
# --------------

JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_LIFETIME = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


# --------------
# INTERNAL HELPERS
# --------------

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _generate_jti() -> str:
    """Generate a globally unique token ID."""
    return uuid4().hex


def _require_secret(secret: Optional[str]) -> str:
    if not secret:
        raise ConfigurationError("JWT signing secret is not configured (JWT_SECRET_KEY).")
    return secret


# --------------
# CREATE TOKENS
# --------------

def create_access_token(user, secret: str, issuer: str, audience: str, now: Optional[datetime] = None) -> str:
    """
    Create an access token for `user`, signed with HMAC-SHA256 over `secret`.

    `user` is anything exposing `id`, `email` and `role` (ORM row or schema).
    The `jti` claim is random, so two tokens issued for the same user in the
    same second still differ.
    """
    key = _require_secret(secret)
    now = now or _utcnow()
    if now.tzinfo is None:
        # Naive datetimes are taken as UTC, not host-local time
        now = now.replace(tzinfo=timezone.utc)
    expire = now + ACCESS_TOKEN_LIFETIME

    payload = {
        "sub": str(user.id),                # Subject = internal user ID
        "email": user.email,
        "role": user.role,
        "jti": _generate_jti(),             # Token identifier
        "iss": issuer,
        "aud": audience,
        "iat": int(now.timestamp()),        # Issued at
        "exp": int(expire.timestamp()),     # Expiration
    }

    return jwt.encode(payload, key, algorithm=JWT_ALGORITHM)


# --------------
# VERIFY TOKENS
# --------------

def verify_jwt_token(token: str, secret: str, issuer: str, audience: str) -> Dict[str, Any]:
    """
    Verify an access token.

    Performs:
    - Signature validation
    - Algorithm enforcement
    - Exp validation
    - Audience & issuer validation
    """
    key = _require_secret(secret)
    try:
        return jwt.decode(
            token,
            key,
            algorithms=[JWT_ALGORITHM],
            audience=audience,
            issuer=issuer,
            options={
                "require_exp": True,
                "require_iat": True,
                "require_sub": True,
                "require_jti": True,
            },
        )
    except JWTError as e:
        raise InvalidTokenError(f"Token validation failed: {e}") from e


class TokenIssuer:
    """Binds the signing secret, issuer and audience used for every token."""

    def __init__(self, secret: str, issuer: str, audience: str):
        self.secret = _require_secret(secret)
        self.issuer = issuer
        self.audience = audience

    def issue(self, user, now: Optional[datetime] = None) -> str:
        return create_access_token(user, self.secret, self.issuer, self.audience, now=now)

    def verify(self, token: str) -> Dict[str, Any]:
        return verify_jwt_token(token, self.secret, self.issuer, self.audience)


@lru_cache()
def get_token_issuer() -> TokenIssuer:
    return TokenIssuer(settings.JWT_SECRET_KEY, settings.JWT_ISSUER, settings.JWT_AUDIENCE)
