"""Sign-in identifier kinds and their resolution order."""

from dataclasses import dataclass
from typing import Literal

from omni_auth.features.auth.services.phone_validator import (
    PhoneInput,
    clean_phone_input,
    is_blank,
)


@dataclass(frozen=True, slots=True)
class PhoneIdentifier:
    country_code: str
    phone_number: str
    kind: Literal["phone"] = "phone"


@dataclass(frozen=True, slots=True)
class WhatsappIdentifier:
    country_code: str
    phone_number: str
    kind: Literal["whatsapp"] = "whatsapp"


@dataclass(frozen=True, slots=True)
class EmailIdentifier:
    email: str
    kind: Literal["email"] = "email"


@dataclass(frozen=True, slots=True)
class UsernameIdentifier:
    username: str
    kind: Literal["username"] = "username"


SignInIdentifier = (
    PhoneIdentifier | WhatsappIdentifier | EmailIdentifier | UsernameIdentifier
)


def resolve_sign_in_identifier(
    *,
    email: str | None = None,
    username: str | None = None,
    country_code: PhoneInput = None,
    phone_number: PhoneInput = None,
    whatsapp_country_code: PhoneInput = None,
    whatsapp_phone_number: PhoneInput = None,
) -> SignInIdentifier | None:
    """Pick the first fully specified identifier.

    Priority: phone pair, WhatsApp pair, email, username. The remaining
    fields are ignored even when present. Returns None when nothing usable
    was supplied.
    """
    if not is_blank(country_code) and not is_blank(phone_number):
        return PhoneIdentifier(
            country_code=clean_phone_input(country_code),  # type: ignore[arg-type]
            phone_number=clean_phone_input(phone_number),  # type: ignore[arg-type]
        )
    if not is_blank(whatsapp_country_code) and not is_blank(whatsapp_phone_number):
        return WhatsappIdentifier(
            country_code=clean_phone_input(whatsapp_country_code),  # type: ignore[arg-type]
            phone_number=clean_phone_input(whatsapp_phone_number),  # type: ignore[arg-type]
        )
    if email and email.strip():
        return EmailIdentifier(email=email.strip())
    if username and username.strip():
        return UsernameIdentifier(username=username.strip())
    return None
