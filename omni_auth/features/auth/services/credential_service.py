"""Password verification and access-token issuance."""

import logging
from datetime import timedelta
from typing import Any, Protocol

from omni_auth.features.auth.errors import InvalidCredentialsError
from omni_auth.features.auth.models import User

logger = logging.getLogger(__name__)


class PasswordVerifier(Protocol):
    """Protocol for password verification operations."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        ...


class TokenCreator(Protocol):
    """Protocol for JWT token creation operations."""

    def __call__(
        self, data: dict[str, Any], expires_delta: timedelta | None = None
    ) -> str:
        """Create an access token."""
        ...


class CredentialService:
    """Check a password and sign an access token for the user."""

    def __init__(
        self,
        password_verifier: PasswordVerifier,
        token_creator: TokenCreator,
        log: logging.Logger | None = None,
    ):
        """Initialize the service with dependencies.

        Args:
            password_verifier: Service for verifying passwords
            token_creator: Service for signing access tokens
            log: Logger, defaults to the module logger
        """
        self.password_verifier = password_verifier
        self.token_creator = token_creator
        self.logger = log or logger

    @staticmethod
    def build_claims(user: User) -> dict[str, Any]:
        return {
            "email": user.email,
            "username": user.username,
            "sub": str(user.id),
        }

    def issue_token(
        self,
        user: User,
        plain_password: str,
        hashed_password: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Verify the password and return a signed token.

        Raises:
            InvalidCredentialsError: If the password does not match the hash.
        """
        if not self.password_verifier.verify(plain_password, hashed_password):
            self.logger.info("Password mismatch for user %s", user.id)
            raise InvalidCredentialsError()

        access_token = self.token_creator(
            data=self.build_claims(user), expires_delta=expires_delta
        )
        self.logger.info("Access token issued for user %s", user.id)
        return access_token
