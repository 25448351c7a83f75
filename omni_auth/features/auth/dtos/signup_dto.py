"""Sign-up data transfer objects."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PhoneField = int | str | None


class SignupRequest(BaseModel):
    """Request model for sign-up.

    Every identifier is optional; at least one must be present. Phone
    fields accept plain integers or strings with punctuation.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str | None = None
    username: str | None = None
    country_code: PhoneField = None
    phone_number: PhoneField = None
    whatsapp_country_code: PhoneField = None
    whatsapp_phone_number: PhoneField = None
    password: str = Field(min_length=1)


class SignupResponse(BaseModel):
    """Response model for successful sign-up."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    user_id: str
    email: str
    username: str
    country_code: str | None = None
    phone_number: str | None = None
    whatsapp_country_code: str | None = None
    whatsapp_phone_number: str | None = None
