"""Sign-in use case module."""

from omni_auth.features.auth.errors import (
    BadInputError,
    InvalidCredentialsError,
    InvalidPhoneNumberError,
    UnauthorizedError,
)

from .signin_usecase import SigninUseCaseImpl

__all__ = [
    "SigninUseCaseImpl",
    "BadInputError",
    "InvalidCredentialsError",
    "InvalidPhoneNumberError",
    "UnauthorizedError",
]
