"""Use case for signing in and issuing an access token."""

import logging
from datetime import timedelta

from omni_auth.features.auth.dtos import SigninRequest, SigninResponse
from omni_auth.features.auth.errors import InvalidCredentialsError
from omni_auth.features.auth.identifiers import (
    PhoneIdentifier,
    WhatsappIdentifier,
    resolve_sign_in_identifier,
)
from omni_auth.features.auth.repositories import UserRepository
from omni_auth.features.auth.services.credential_service import CredentialService
from omni_auth.features.auth.services.phone_validator import PhoneValidator

logger = logging.getLogger(__name__)


class SigninUseCaseImpl:
    """Implementation of the sign-in use case."""

    def __init__(
        self,
        user_repository: UserRepository,
        credential_service: CredentialService,
        access_token_expires: timedelta,
        phone_validator: PhoneValidator | None = None,
        log: logging.Logger | None = None,
    ):
        """Initialize the use case with dependencies.

        Args:
            user_repository: Store the user is looked up in
            credential_service: Verifies the password and signs the token
            access_token_expires: Lifetime of issued tokens
            phone_validator: Validates a phone or WhatsApp identifier
            log: Logger, defaults to the module logger
        """
        self.logger = log or logger
        self.user_repository = user_repository
        self.credential_service = credential_service
        self.access_token_expires = access_token_expires
        self.phone_validator = phone_validator or PhoneValidator(self.logger)

    async def execute(self, request: SigninRequest) -> SigninResponse:
        """Resolve the user by identifier priority and return a token.

        Only the first fully specified identifier is used, in the order
        phone pair, WhatsApp pair, email, username.

        Raises:
            InvalidPhoneNumberError: If the chosen phone pair is invalid
            InvalidCredentialsError: If no user matches or the password is wrong
        """
        identifier = resolve_sign_in_identifier(
            email=request.email,
            username=request.username,
            country_code=request.country_code,
            phone_number=request.phone_number,
            whatsapp_country_code=request.whatsapp_country_code,
            whatsapp_phone_number=request.whatsapp_phone_number,
        )
        if identifier is None:
            self.logger.info("Sign-in attempted without an identifier")
            raise InvalidCredentialsError()

        # Raw input: a pair that cleans down to no digits is still invalid.
        if isinstance(identifier, PhoneIdentifier):
            self.phone_validator.ensure_valid_pair(
                request.country_code, request.phone_number, "phone number"
            )
        elif isinstance(identifier, WhatsappIdentifier):
            self.phone_validator.ensure_valid_pair(
                request.whatsapp_country_code,
                request.whatsapp_phone_number,
                "whatsapp phone number",
            )

        user = await self.user_repository.find_by_identifier(identifier)
        if user is None:
            self.logger.info(
                "Sign-in failed, no user for %s identifier", identifier.kind
            )
            raise InvalidCredentialsError()

        access_token = self.credential_service.issue_token(
            user,
            request.password,
            user.hashed_password,
            expires_delta=self.access_token_expires,
        )

        return SigninResponse(
            message="Successfully generated access token",
            access_token=access_token,
            token_type="bearer",
            expires_in=int(self.access_token_expires.total_seconds()),
        )
