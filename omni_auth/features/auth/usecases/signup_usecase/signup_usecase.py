"""Use case for registering a new identity."""

import logging
from typing import Protocol

from omni_auth.features.auth.dtos import SignupRequest, SignupResponse
from omni_auth.features.auth.repositories import NewUser, UserRepository
from omni_auth.features.auth.services.identity_sanitizer import IdentitySanitizer
from omni_auth.features.auth.services.phone_validator import PhoneValidator
from omni_auth.features.auth.services.uniqueness_checker import (
    IdentityCandidate,
    UniquenessChecker,
)

logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    """Protocol for password hashing operations."""

    def hash(self, secret: str) -> str:
        """Hash a password."""
        ...


class SignupUseCaseImpl:
    """Implementation of the sign-up use case."""

    def __init__(
        self,
        password_hasher: PasswordHasher,
        user_repository: UserRepository,
        identity_sanitizer: IdentitySanitizer,
        phone_validator: PhoneValidator | None = None,
        uniqueness_checker: UniquenessChecker | None = None,
        log: logging.Logger | None = None,
    ):
        """Initialize the use case with dependencies.

        Args:
            password_hasher: Service for hashing passwords
            user_repository: Store the new record is written to
            identity_sanitizer: Derives the canonical email and username
            phone_validator: Validates phone and WhatsApp pairs
            uniqueness_checker: Rejects already registered identifiers
            log: Logger, defaults to the module logger
        """
        self.logger = log or logger
        self.password_hasher = password_hasher
        self.user_repository = user_repository
        self.identity_sanitizer = identity_sanitizer
        self.phone_validator = phone_validator or PhoneValidator(self.logger)
        self.uniqueness_checker = uniqueness_checker or UniquenessChecker(
            user_repository, self.logger
        )

    async def execute(self, request: SignupRequest) -> SignupResponse:
        """Validate, sanitize, check and persist a new user.

        Persistence is the last step, so a failure anywhere leaves the
        store untouched.

        Args:
            request: The sign-up request

        Returns:
            Response with the stored identifiers and the new user ID

        Raises:
            IncompletePhoneNumberError: If a phone pair is half specified
            InvalidPhoneNumberError: If a phone pair fails validation
            MissingIdentifierError: If no identifier was supplied
            ConflictError: If any identifier is already registered
        """
        phone = self.phone_validator.ensure_valid_pair(
            request.country_code, request.phone_number, "phone number"
        )
        whatsapp = self.phone_validator.ensure_valid_pair(
            request.whatsapp_country_code,
            request.whatsapp_phone_number,
            "whatsapp phone number",
        )

        identity = self.identity_sanitizer.sanitize(
            email=request.email,
            username=request.username,
            country_code=phone.country_code if phone else None,
            phone_number=phone.national_number if phone else None,
            whatsapp_country_code=whatsapp.country_code if whatsapp else None,
            whatsapp_phone_number=whatsapp.national_number if whatsapp else None,
        )

        candidate = IdentityCandidate(
            email=identity.email,
            username=identity.username,
            country_code=phone.country_code if phone else None,
            phone_number=phone.national_number if phone else None,
            whatsapp_country_code=whatsapp.country_code if whatsapp else None,
            whatsapp_phone_number=whatsapp.national_number if whatsapp else None,
        )
        await self.uniqueness_checker.check_exists(candidate)

        hashed_password = self.password_hasher.hash(request.password)
        user = await self.user_repository.create(
            NewUser(
                email=candidate.email,
                username=candidate.username,
                hashed_password=hashed_password,
                country_code=candidate.country_code,
                phone_number=candidate.phone_number,
                whatsapp_country_code=candidate.whatsapp_country_code,
                whatsapp_phone_number=candidate.whatsapp_phone_number,
            )
        )
        self.logger.info("User with id %s created successfully", user.id)

        return SignupResponse(
            message="Successfully created user",
            user_id=str(user.id),
            email=user.email,
            username=user.username,
            country_code=user.country_code,
            phone_number=user.phone_number,
            whatsapp_country_code=user.whatsapp_country_code,
            whatsapp_phone_number=user.whatsapp_phone_number,
        )
