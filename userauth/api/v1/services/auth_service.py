import logging
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from userauth.api.v1.repositories import UserRepository, get_user_repository
from userauth.api.v1.schemas import (
    RegisterRequest,
    SignInRequest,
    SignInResponse,
    UserCreate,
    UserFilter,
    UserListResponse,
)
from userauth.core.config import settings
from userauth.core.helpers import TokenIssuer, get_token_issuer
from userauth.core.models import DuplicateEmailError, InvalidCredentialsError, RecordConflictError

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, user_repository: UserRepository, token_issuer: TokenIssuer):
        self.user_repository = user_repository
        self.token_issuer = token_issuer

    def _build_sign_in_response(self, user) -> SignInResponse:
        return SignInResponse(access_token=self.token_issuer.issue(user), token_type="Bearer")

    async def register(self, db: AsyncSession, request: RegisterRequest) -> SignInResponse:
        # Check-then-insert; the unique index on email catches concurrent duplicates
        if await self.user_repository.email_exists(db, request.email):
            raise DuplicateEmailError()

        user_in = UserCreate(email=request.email, password=request.password, role=settings.DEFAULT_ROLE)
        try:
            user = await self.user_repository.create(db, user_in)
        except RecordConflictError as e:
            raise DuplicateEmailError() from e

        logger.info(f"Registered user {user.id}")
        return self._build_sign_in_response(user)

    async def sign_in(self, db: AsyncSession, request: SignInRequest) -> SignInResponse:
        user = await self.user_repository.get_user_by_credentials(db, request.email, request.password)
        if user is None:
            raise InvalidCredentialsError()

        return self._build_sign_in_response(user)

    async def list_users(self, db: AsyncSession, filters: UserFilter) -> UserListResponse:
        return await self.user_repository.list_users(db, filters)


@lru_cache()
def get_auth_service(
        user_repository: UserRepository = Depends(get_user_repository),
        token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(user_repository, token_issuer)
