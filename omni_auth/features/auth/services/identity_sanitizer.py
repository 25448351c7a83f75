"""Derivation of the canonical email and username for a new identity."""

from dataclasses import dataclass

from omni_auth.features.auth.errors import InvalidEmailError, MissingIdentifierError
from omni_auth.features.auth.services.phone_validator import (
    PhoneInput,
    clean_phone_input,
    is_blank,
)


@dataclass(frozen=True, slots=True)
class CanonicalIdentity:
    email: str
    username: str


def _pair(country_code: PhoneInput, phone_number: PhoneInput) -> str | None:
    if is_blank(country_code) or is_blank(phone_number):
        return None
    return f"{clean_phone_input(country_code)}{clean_phone_input(phone_number)}"  # type: ignore[arg-type]


def _text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class IdentitySanitizer:
    """Fill in a blank email and/or username from the other identifiers.

    Email priority when blank: username, phone pair, WhatsApp pair (the
    last one under its own placeholder domain). Username priority when
    blank: non-empty local part of a supplied email, phone pair, WhatsApp
    pair.
    """

    def __init__(
        self,
        optional_email_domain: str = "optional.com",
        whatsapp_email_domain: str = "whatsapp.com",
    ):
        self.optional_email_domain = optional_email_domain
        self.whatsapp_email_domain = whatsapp_email_domain

    def sanitize(
        self,
        *,
        email: str | None = None,
        username: str | None = None,
        country_code: PhoneInput = None,
        phone_number: PhoneInput = None,
        whatsapp_country_code: PhoneInput = None,
        whatsapp_phone_number: PhoneInput = None,
    ) -> CanonicalIdentity:
        """Return the canonical identity.

        Raises:
            MissingIdentifierError: If every identifying field is blank.
            InvalidEmailError: If the only identifier is an email with an
                empty local part.
        """
        email = _text(email)
        username = _text(username)
        phone = _pair(country_code, phone_number)
        whatsapp = _pair(whatsapp_country_code, whatsapp_phone_number)

        if email is None and username is None and phone is None and whatsapp is None:
            raise MissingIdentifierError()

        sanitized_email = self._sanitize_email(email, username, phone, whatsapp)
        sanitized_username = self._sanitize_username(
            email, username, phone, whatsapp, sanitized_email
        )
        return CanonicalIdentity(email=sanitized_email, username=sanitized_username)

    def _sanitize_email(
        self,
        email: str | None,
        username: str | None,
        phone: str | None,
        whatsapp: str | None,
    ) -> str:
        if email is not None:
            return email.lower()
        if username is not None:
            return f"{username.lower()}@{self.optional_email_domain}"
        if phone is not None:
            return f"{phone}@{self.optional_email_domain}"
        return f"{whatsapp}@{self.whatsapp_email_domain}"

    def _sanitize_username(
        self,
        email: str | None,
        username: str | None,
        phone: str | None,
        whatsapp: str | None,
        sanitized_email: str,
    ) -> str:
        if username is not None:
            return username
        if email is not None:
            local_part = sanitized_email.split("@", 1)[0].strip()
            if local_part:
                return local_part
        if phone is not None:
            return phone
        if whatsapp is not None:
            return whatsapp
        raise InvalidEmailError(sanitized_email)
