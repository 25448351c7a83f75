"""Sign-up use case module."""

from omni_auth.features.auth.errors import (
    BadInputError,
    ConflictError,
    IncompletePhoneNumberError,
    InvalidPhoneNumberError,
    MissingIdentifierError,
)

from .signup_usecase import PasswordHasher, SignupUseCaseImpl

__all__ = [
    "SignupUseCaseImpl",
    "PasswordHasher",
    "BadInputError",
    "ConflictError",
    "IncompletePhoneNumberError",
    "InvalidPhoneNumberError",
    "MissingIdentifierError",
]
