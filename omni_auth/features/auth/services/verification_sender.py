"""Out-of-band verification delivery through Twilio Verify."""

import asyncio
import logging
from typing import Protocol

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from omni_auth.features.auth.errors import (
    VerificationNotConfiguredError,
    VerificationSendError,
)

logger = logging.getLogger(__name__)


class VerificationSender(Protocol):
    """Protocol for sending verification messages."""

    async def send_email_verification(self, email: str) -> None:
        """Start an email verification for the address."""
        ...


class TwilioVerificationSender:
    """VerificationSender backed by a Twilio Verify service."""

    def __init__(
        self,
        account_sid: str | None,
        auth_token: str | None,
        verify_service_sid: str | None,
        client: Client | None = None,
        log: logging.Logger | None = None,
    ):
        """Initialize the sender.

        Args:
            account_sid: Twilio account SID
            auth_token: Twilio auth token
            verify_service_sid: SID of the Verify service used for emails
            client: Prebuilt Twilio client, built from the credentials if omitted
            log: Logger, defaults to the module logger
        """
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.verify_service_sid = verify_service_sid
        self.logger = log or logger
        self._client = client

    @property
    def is_configured(self) -> bool:
        if not self.verify_service_sid:
            return False
        return self._client is not None or bool(
            self.account_sid and self.auth_token
        )

    def _get_client(self) -> Client:
        if self._client is None:
            self._client = Client(self.account_sid, self.auth_token)
        return self._client

    def _create_verification(self, email: str) -> None:
        self._get_client().verify.v2.services(
            self.verify_service_sid
        ).verifications.create(to=email, channel="email")

    async def send_email_verification(self, email: str) -> None:
        """Ask Twilio Verify to email a verification code.

        Raises:
            VerificationNotConfiguredError: If a credential or the service SID
                is missing
            VerificationSendError: If Twilio rejects the request
        """
        if not self.is_configured:
            raise VerificationNotConfiguredError()

        try:
            # The Twilio client is blocking
            await asyncio.to_thread(self._create_verification, email)
        except TwilioException as e:
            self.logger.error("Failed to send verification email: %s", e)
            raise VerificationSendError() from e

        self.logger.info("Verification email sent to %s", email)
