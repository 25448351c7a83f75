"""Use case for resolving a token subject to its stored identity."""

from uuid import UUID

from omni_auth.features.auth.dtos import UserProfileResponse
from omni_auth.features.auth.errors import InvalidCredentialsError
from omni_auth.features.auth.repositories import UserRepository


class GetCurrentUserUseCaseImpl:
    """Implementation of the get current user use case."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> UserProfileResponse:
        """Return the stored profile for a token subject.

        Raises:
            InvalidCredentialsError: If the subject no longer exists
        """
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise InvalidCredentialsError()

        return UserProfileResponse(
            user_id=str(user.id),
            email=user.email,
            username=user.username,
            country_code=user.country_code,
            phone_number=user.phone_number,
            whatsapp_country_code=user.whatsapp_country_code,
            whatsapp_phone_number=user.whatsapp_phone_number,
        )
