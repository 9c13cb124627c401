"""
Authentication Router Module

Registration, login and the admin-only user listing.

Security Features:
    - HS256 JWT bearer tokens
    - Generic login failure message (no hint whether the email exists)
    - Admin role required for the user listing
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from userauth.api.v1.schemas import (
    RegisterRequest,
    SignInRequest,
    SignInResponse,
    TokenPayload,
    UserFilter,
    UserRead,
    get_user_filter,
)
from userauth.api.v1.services import AuthService, get_auth_service
from userauth.core.models import DuplicateEmailError, InvalidCredentialsError
from userauth.core.schemas import MessageResponse
from userauth.core.security import get_current_admin_user
from userauth.db.session import get_session

# Configure module logger
logger = logging.getLogger(__name__)

# Router configuration
PREFIX = "/auth"
router = APIRouter(
    prefix=PREFIX,
    responses={
        500: {"model": MessageResponse, "description": "Internal Server Error"},
    },
)


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


# ============================================================================
# REGISTRATION / LOGIN
# ============================================================================


@router.post(
    "/register",
    response_model=SignInResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
    description="Creates a user with the default role and returns an access token",
    responses={400: {"model": MessageResponse, "description": "Email already in use"}},
)
async def register(
    user_in: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_session)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Register a new user in the system.

    Returns:
        SignInResponse with a bearer token for the new user, or
        400 {"message"} when the email is already registered.
    """
    try:
        return await auth_service.register(db, user_in)

    except DuplicateEmailError as e:
        logger.warning("Registration rejected: email already registered")
        return _message(e.status_code, e.message)

    except Exception:
        logger.error("Error occurred during registration", exc_info=True)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred during registration")


@router.post(
    "/login",
    response_model=SignInResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign in",
    description="Exchanges email and password for an access token",
    responses={401: {"model": MessageResponse, "description": "Invalid credentials"}},
)
async def login(
    credentials: SignInRequest,
    db: Annotated[AsyncSession, Depends(get_session)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    try:
        return await auth_service.sign_in(db, credentials)

    except InvalidCredentialsError as e:
        logger.warning("Login failed: invalid email or password")
        return _message(e.status_code, e.message)

    except Exception:
        logger.error("Error occurred during login", exc_info=True)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred during login")


# ============================================================================
# USER LISTING (ADMIN)
# ============================================================================


@router.get(
    "/users",
    response_model=List[UserRead],
    summary="List users",
    description="Paginated user listing filtered by role and email; admin only",
)
async def get_users(
    response: Response,
    filters: Annotated[UserFilter, Depends(get_user_filter)],
    admin: Annotated[TokenPayload, Depends(get_current_admin_user)],
    db: Annotated[AsyncSession, Depends(get_session)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """
    Return one page of users.

    Totals are reported in the X-Total-Count and X-Total-Pages headers.
    An empty page is still a 200 with an empty list.
    """
    try:
        logger.info(f"Fetching users for admin {admin.sub}")
        result = await auth_service.list_users(db, filters)

        response.headers["X-Total-Count"] = str(result.total_count)
        response.headers["X-Total-Pages"] = str(result.total_pages)

        if not result.items:
            logger.warning("No users found")
        else:
            logger.info(f"Successfully retrieved {len(result.items)} users")

        return result.items

    except Exception:
        logger.error("Error occurred while fetching users", exc_info=True)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "An error occurred while retrieving users")
