"""Cross-domain uniqueness check for a sign-up candidate."""

import logging
from dataclasses import dataclass

from omni_auth.features.auth.errors import (
    ConflictError,
    EmailAlreadyExistsError,
    PhoneNumberAlreadyExistsError,
    UsernameAlreadyExistsError,
    WhatsappPhoneNumberAlreadyExistsError,
    WhatsappPhoneNumberRegisteredAsPhoneError,
)
from omni_auth.features.auth.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class IdentityCandidate:
    """Sanitized identifiers of a user about to be created."""

    email: str
    username: str
    country_code: str | None = None
    phone_number: str | None = None
    whatsapp_country_code: str | None = None
    whatsapp_phone_number: str | None = None


class UniquenessChecker:
    """Reject a candidate whose identifiers are already registered.

    Checks run in a fixed order and stop at the first collision: email,
    username, phone pair, WhatsApp pair, then the WhatsApp pair against
    every user's plain phone pair.
    """

    def __init__(
        self, user_repository: UserRepository, log: logging.Logger | None = None
    ):
        self.user_repository = user_repository
        self.logger = log or logger

    async def check_exists(self, candidate: IdentityCandidate) -> None:
        """Raise a ConflictError subclass naming the first colliding domain."""
        try:
            await self._check(candidate)
        except ConflictError as e:
            self.logger.info("Sign-up rejected, %s collision", e.domain)
            raise

    async def _check(self, candidate: IdentityCandidate) -> None:
        if await self.user_repository.find_by_email(candidate.email):
            raise EmailAlreadyExistsError()

        if await self.user_repository.find_by_username(candidate.username):
            raise UsernameAlreadyExistsError()

        if candidate.country_code and candidate.phone_number:
            if await self.user_repository.find_by_phone(
                candidate.country_code, candidate.phone_number
            ):
                raise PhoneNumberAlreadyExistsError()

        if candidate.whatsapp_country_code and candidate.whatsapp_phone_number:
            if await self.user_repository.find_by_whatsapp(
                candidate.whatsapp_country_code, candidate.whatsapp_phone_number
            ):
                raise WhatsappPhoneNumberAlreadyExistsError()

            if await self.user_repository.find_by_phone(
                candidate.whatsapp_country_code, candidate.whatsapp_phone_number
            ):
                raise WhatsappPhoneNumberRegisteredAsPhoneError()
