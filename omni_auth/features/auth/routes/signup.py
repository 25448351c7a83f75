"""Signup route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from omni_auth.core.security import get_password_hash
from omni_auth.core.settings import get_settings
from omni_auth.db.session import get_db_session
from omni_auth.features.auth.dtos import SignupRequest, SignupResponse
from omni_auth.features.auth.repositories import SqlAlchemyUserRepository
from omni_auth.features.auth.services.identity_sanitizer import IdentitySanitizer
from omni_auth.features.auth.usecases.signup_usecase import (
    BadInputError,
    ConflictError,
    SignupUseCaseImpl,
)


class PasswordHasherImpl:
    """Wrapper for password hashing to match protocol."""

    def hash(self, secret: str) -> str:
        """Hash a password."""
        return get_password_hash(secret)


class SignupUseCase(Protocol):
    """Protocol for the sign-up use case."""

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Register a new user."""
        ...


async def get_signup_use_case() -> SignupUseCase:
    """Dependency injection for the sign-up use case."""
    settings = get_settings()
    return SignupUseCaseImpl(
        password_hasher=PasswordHasherImpl(),
        user_repository=SqlAlchemyUserRepository(get_db_session),
        identity_sanitizer=IdentitySanitizer(
            optional_email_domain=settings.optional_email_domain,
            whatsapp_email_domain=settings.whatsapp_email_domain,
        ),
    )


router = APIRouter()


@router.post(
    "/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupRequest,
    use_case: SignupUseCase = Depends(get_signup_use_case),
) -> SignupResponse:
    """Register a user from any combination of email, username, phone
    number and WhatsApp number.

    Missing email and username are derived from the other identifiers.
    """
    try:
        return await use_case.execute(request)
    except BadInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
