"""Email verification route handler."""

from typing import Protocol

from fastapi import APIRouter, Depends, HTTPException, status

from omni_auth.core.settings import get_settings
from omni_auth.features.auth.dtos import VerifyEmailRequest, VerifyEmailResponse
from omni_auth.features.auth.services.verification_sender import (
    TwilioVerificationSender,
)
from omni_auth.features.auth.usecases.send_verification_email_usecase import (
    BadInputError,
    SendVerificationEmailUseCaseImpl,
    VerificationNotConfiguredError,
    VerificationSendError,
)


class SendVerificationEmailUseCase(Protocol):
    """Protocol for the send verification email use case."""

    async def execute(self, request: VerifyEmailRequest) -> VerifyEmailResponse:
        """Start an email verification."""
        ...


async def get_send_verification_email_use_case() -> SendVerificationEmailUseCase:
    """Dependency injection for the send verification email use case."""
    settings = get_settings()
    return SendVerificationEmailUseCaseImpl(
        verification_sender=TwilioVerificationSender(
            account_sid=settings.twilio_account_sid,
            auth_token=settings.twilio_auth_token,
            verify_service_sid=settings.twilio_verify_service_sid,
        ),
    )


router = APIRouter()


@router.post(
    "/verify-email",
    response_model=VerifyEmailResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def verify_email(
    request: VerifyEmailRequest,
    use_case: SendVerificationEmailUseCase = Depends(
        get_send_verification_email_use_case
    ),
) -> VerifyEmailResponse:
    """Send a verification code to the given email address."""
    try:
        return await use_case.execute(request)
    except BadInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except VerificationNotConfiguredError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except VerificationSendError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
