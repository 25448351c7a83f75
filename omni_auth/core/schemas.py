import uuid

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """Represents an authenticated user taken from a bearer token."""

    user_id: uuid.UUID
    email: str | None = None
    username: str | None = None
