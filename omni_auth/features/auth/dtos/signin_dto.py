"""Sign-in data transfer objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from omni_auth.features.auth.dtos.signup_dto import PhoneField


class SigninRequest(BaseModel):
    """Request model for sign-in with any one identifier."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = None
    username: str | None = None
    country_code: PhoneField = None
    phone_number: PhoneField = None
    whatsapp_country_code: PhoneField = None
    whatsapp_phone_number: PhoneField = None
    password: str


class SigninResponse(BaseModel):
    """Response model for successful sign-in."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserProfileResponse(BaseModel):
    """Stored identity of the authenticated user."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    email: str
    username: str
    country_code: str | None = None
    phone_number: str | None = None
    whatsapp_country_code: str | None = None
    whatsapp_phone_number: str | None = None
