"""Authentication data transfer objects."""

from .signin_dto import SigninRequest, SigninResponse, UserProfileResponse
from .signup_dto import SignupRequest, SignupResponse
from .verification_dto import VerifyEmailRequest, VerifyEmailResponse

__all__ = [
    "SignupRequest",
    "SignupResponse",
    "SigninRequest",
    "SigninResponse",
    "UserProfileResponse",
    "VerifyEmailRequest",
    "VerifyEmailResponse",
]
