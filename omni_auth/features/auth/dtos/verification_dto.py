"""Verification data transfer objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class VerifyEmailRequest(BaseModel):
    """Request model for sending a verification email."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str


class VerifyEmailResponse(BaseModel):
    """Response model for a started email verification."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    email: str
