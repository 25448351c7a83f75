"""Send verification email use case module."""

from omni_auth.features.auth.errors import (
    BadInputError,
    VerificationError,
    VerificationNotConfiguredError,
    VerificationSendError,
)

from .send_verification_email_usecase import SendVerificationEmailUseCaseImpl

__all__ = [
    "SendVerificationEmailUseCaseImpl",
    "BadInputError",
    "VerificationError",
    "VerificationNotConfiguredError",
    "VerificationSendError",
]
