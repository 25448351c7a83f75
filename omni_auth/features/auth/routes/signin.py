"""Signin route handlers."""

from datetime import timedelta
from typing import Any, Protocol
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from omni_auth.core.schemas import AuthenticatedUser
from omni_auth.core.security import (
    create_access_token,
    get_current_user,
    verify_password,
)
from omni_auth.core.settings import get_settings
from omni_auth.db.session import get_db_session
from omni_auth.features.auth.dtos import (
    SigninRequest,
    SigninResponse,
    UserProfileResponse,
)
from omni_auth.features.auth.repositories import SqlAlchemyUserRepository
from omni_auth.features.auth.services.credential_service import CredentialService
from omni_auth.features.auth.usecases.get_current_user_usecase import (
    GetCurrentUserUseCaseImpl,
)
from omni_auth.features.auth.usecases.signin_usecase import (
    BadInputError,
    SigninUseCaseImpl,
    UnauthorizedError,
)


class PasswordVerifierImpl:
    """Wrapper for password verification to match protocol."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return verify_password(plain_password, hashed_password)


class TokenCreatorImpl:
    """Wrapper for token creation to match protocol."""

    def __call__(self, data: dict[str, Any], expires_delta=None) -> str:
        """Create an access token."""
        return create_access_token(data, expires_delta)


class SigninUseCase(Protocol):
    """Protocol for the sign-in use case."""

    async def execute(self, request: SigninRequest) -> SigninResponse:
        """Authenticate user and return token."""
        ...


class GetCurrentUserUseCase(Protocol):
    """Protocol for the get current user use case."""

    async def execute(self, user_id: UUID) -> UserProfileResponse:
        """Return the stored profile of the token subject."""
        ...


async def get_signin_use_case() -> SigninUseCase:
    """Dependency injection for the sign-in use case."""
    settings = get_settings()
    return SigninUseCaseImpl(
        user_repository=SqlAlchemyUserRepository(get_db_session),
        credential_service=CredentialService(
            password_verifier=PasswordVerifierImpl(),
            token_creator=TokenCreatorImpl(),
        ),
        access_token_expires=timedelta(minutes=settings.access_token_expire_minutes),
    )


async def get_current_user_use_case() -> GetCurrentUserUseCase:
    """Dependency injection for the get current user use case."""
    return GetCurrentUserUseCaseImpl(
        user_repository=SqlAlchemyUserRepository(get_db_session),
    )


router = APIRouter()


@router.post("/signin", response_model=SigninResponse)
async def signin(
    request: SigninRequest,
    use_case: SigninUseCase = Depends(get_signin_use_case),
) -> SigninResponse:
    """Authenticate with phone, WhatsApp number, email or username.

    When several identifiers are sent, the first complete one in that
    order is used.
    """
    try:
        return await use_case.execute(request)
    except BadInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_info(
    current_user: AuthenticatedUser = Depends(get_current_user),
    use_case: GetCurrentUserUseCase = Depends(get_current_user_use_case),
) -> UserProfileResponse:
    """Get current authenticated user information."""
    try:
        return await use_case.execute(current_user.user_id)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
