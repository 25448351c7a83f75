"""Unit tests for identity_sanitizer.py."""

import pytest

from omni_auth.features.auth.errors import InvalidEmailError, MissingIdentifierError
from omni_auth.features.auth.services.identity_sanitizer import (
    CanonicalIdentity,
    IdentitySanitizer,
)


class TestSanitizeEmail:
    def test_supplied_email_is_lowercased_only(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            email="Alice@Example.COM", username="AliceW", country_code=1,
            phone_number=5551234567,
        )

        assert identity == CanonicalIdentity(
            email="alice@example.com", username="AliceW"
        )

    def test_blank_email_derives_from_lowercased_username(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            username="Alice", country_code=1, phone_number=5551234567
        )

        assert identity.email == "alice@optional.com"
        assert identity.username == "Alice"

    def test_blank_email_and_username_derive_from_phone(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            email="", username="", country_code=1, phone_number=5551234567,
            whatsapp_country_code=44, whatsapp_phone_number=2079460958,
        )

        assert identity.email == "15551234567@optional.com"
        assert identity.username == "15551234567"

    def test_whatsapp_only_uses_whatsapp_domain(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            whatsapp_country_code=44, whatsapp_phone_number=2079460958
        )

        assert identity.email == "442079460958@whatsapp.com"
        assert identity.username == "442079460958"

    def test_custom_domains(self) -> None:
        sanitizer = IdentitySanitizer(
            optional_email_domain="users.invalid",
            whatsapp_email_domain="wa.invalid",
        )

        assert sanitizer.sanitize(username="bob").email == "bob@users.invalid"
        whatsapp_only = sanitizer.sanitize(
            whatsapp_country_code=1, whatsapp_phone_number=5551234567
        )
        assert whatsapp_only.email == "15551234567@wa.invalid"


class TestSanitizeUsername:
    def test_username_from_supplied_email_local_part(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            email="Jane.Doe@Example.com", country_code=1, phone_number=5551234567
        )

        assert identity.username == "jane.doe"

    def test_supplied_username_keeps_case(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(username="  MixedCase ")

        assert identity.username == "MixedCase"
        assert identity.email == "mixedcase@optional.com"

    def test_zero_phone_pair_is_ignored(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            country_code=0, phone_number=0,
            whatsapp_country_code=1, whatsapp_phone_number=5551234567,
        )

        assert identity.username == "15551234567"
        assert identity.email == "15551234567@whatsapp.com"


class TestDegenerateInput:
    def test_all_blank_raises_bad_input(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        with pytest.raises(MissingIdentifierError):
            identity_sanitizer.sanitize(
                email="  ", username=None, country_code=0, phone_number=None
            )

    def test_sanitize_is_idempotent(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        first = identity_sanitizer.sanitize(username="carol")
        second = identity_sanitizer.sanitize(
            email=first.email, username=first.username
        )

        assert second == first


class TestEmptyEmailLocalPart:
    def test_falls_through_to_phone_pair(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            email="@Example.com", country_code=1, phone_number=5551234567
        )

        assert identity.email == "@example.com"
        assert identity.username == "15551234567"

    def test_falls_through_to_whatsapp_pair(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        identity = identity_sanitizer.sanitize(
            email="@example.com",
            whatsapp_country_code=44,
            whatsapp_phone_number=2079460958,
        )

        assert identity.username == "442079460958"

    def test_email_alone_is_rejected(
        self, identity_sanitizer: IdentitySanitizer
    ) -> None:
        with pytest.raises(InvalidEmailError) as exc_info:
            identity_sanitizer.sanitize(email="@example.com")

        assert exc_info.value.email == "@example.com"
