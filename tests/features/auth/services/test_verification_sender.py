"""Unit tests for verification_sender.py."""

from unittest.mock import MagicMock

import pytest
from twilio.base.exceptions import TwilioRestException

from omni_auth.features.auth.errors import (
    VerificationNotConfiguredError,
    VerificationSendError,
)
from omni_auth.features.auth.services.verification_sender import (
    TwilioVerificationSender,
)


@pytest.fixture
def twilio_client() -> MagicMock:
    """Stand-in for twilio.rest.Client."""
    return MagicMock()


@pytest.mark.asyncio
class TestTwilioVerificationSender:
    async def test_creates_email_verification(self, twilio_client: MagicMock):
        sender = TwilioVerificationSender(
            account_sid="AC123",
            auth_token="token",
            verify_service_sid="VA123",
            client=twilio_client,
        )

        await sender.send_email_verification("alice@example.com")

        twilio_client.verify.v2.services.assert_called_once_with("VA123")
        verifications = twilio_client.verify.v2.services.return_value.verifications
        verifications.create.assert_called_once_with(
            to="alice@example.com", channel="email"
        )

    async def test_missing_service_sid(self, twilio_client: MagicMock):
        sender = TwilioVerificationSender(
            account_sid="AC123",
            auth_token="token",
            verify_service_sid=None,
            client=twilio_client,
        )

        with pytest.raises(VerificationNotConfiguredError):
            await sender.send_email_verification("alice@example.com")

        twilio_client.verify.v2.services.assert_not_called()

    async def test_missing_credentials(self):
        sender = TwilioVerificationSender(
            account_sid=None, auth_token=None, verify_service_sid="VA123"
        )

        assert sender.is_configured is False
        with pytest.raises(VerificationNotConfiguredError):
            await sender.send_email_verification("alice@example.com")

    async def test_twilio_failure_becomes_send_error(
        self, twilio_client: MagicMock
    ):
        verifications = twilio_client.verify.v2.services.return_value.verifications
        verifications.create.side_effect = TwilioRestException(
            400, "/Verifications", msg="Invalid parameter"
        )
        sender = TwilioVerificationSender(
            account_sid="AC123",
            auth_token="token",
            verify_service_sid="VA123",
            client=twilio_client,
        )

        with pytest.raises(VerificationSendError) as exc_info:
            await sender.send_email_verification("alice@example.com")

        assert str(exc_info.value) == "Could not send verification email"
        assert isinstance(exc_info.value.__cause__, TwilioRestException)
