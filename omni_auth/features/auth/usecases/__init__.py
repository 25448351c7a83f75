"""Authentication use cases."""

from .get_current_user_usecase import GetCurrentUserUseCaseImpl
from .send_verification_email_usecase import SendVerificationEmailUseCaseImpl
from .signin_usecase import SigninUseCaseImpl
from .signup_usecase import SignupUseCaseImpl

__all__ = [
    "SignupUseCaseImpl",
    "SigninUseCaseImpl",
    "GetCurrentUserUseCaseImpl",
    "SendVerificationEmailUseCaseImpl",
]
