"""Use case for starting an email verification."""

from omni_auth.features.auth.dtos import VerifyEmailRequest, VerifyEmailResponse
from omni_auth.features.auth.errors import InvalidEmailError
from omni_auth.features.auth.services.verification_sender import VerificationSender


class SendVerificationEmailUseCaseImpl:
    """Implementation of the send verification email use case."""

    def __init__(self, verification_sender: VerificationSender):
        self.verification_sender = verification_sender

    async def execute(self, request: VerifyEmailRequest) -> VerifyEmailResponse:
        """Send a verification code to the normalized address.

        Raises:
            InvalidEmailError: If the address is blank or has no local part
                or domain
            VerificationNotConfiguredError: If the provider is not configured
            VerificationSendError: If the provider fails to send
        """
        email = request.email.strip().lower()
        local_part, at, domain = email.partition("@")
        if not (local_part and at and domain):
            raise InvalidEmailError(request.email)

        await self.verification_sender.send_email_verification(email)

        return VerifyEmailResponse(message="Verification email sent", email=email)
