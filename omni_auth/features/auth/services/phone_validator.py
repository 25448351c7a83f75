"""Phone number validation against the country numbering-plan table."""

import logging
import re
from dataclasses import dataclass
from typing import Literal

from omni_auth.features.auth.errors import (
    IncompletePhoneNumberError,
    InvalidPhoneNumberError,
)
from omni_auth.features.auth.services.country_specs import (
    CountrySpec,
    get_country_spec,
)

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"\D")

PhoneInput = int | str | None


@dataclass(frozen=True, slots=True)
class PhoneValidationError:
    error: str
    is_valid: Literal[False] = False


@dataclass(frozen=True, slots=True)
class PhoneValidationSuccess:
    formatted_number: str
    country_code: str
    national_number: str
    length: int
    countries: tuple[str, ...] | None = None
    is_valid: Literal[True] = True


ValidationResult = PhoneValidationError | PhoneValidationSuccess


def clean_phone_input(value: int | str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGITS.sub("", str(value))


def is_blank(value: PhoneInput) -> bool:
    """True for None, empty/whitespace strings and the integer 0."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return value == 0


def _country_info(country_code: str, spec: CountrySpec) -> str:
    if spec.countries:
        return f"NANP ({', '.join(spec.countries)})"
    return f"country code +{country_code}"


def validate_phone_number(
    country_code: int | str, phone_number: int | str
) -> ValidationResult:
    """Validate a (calling code, national number) pair.

    Both inputs are reduced to their digits. The calling code must be an
    exact key of the country table and the national number's digit count
    must fall inside the country's inclusive length range. Leading zeros in
    a string national number are kept and counted.
    """
    clean_country_code = clean_phone_input(country_code)
    clean_phone_number = clean_phone_input(phone_number)

    spec = get_country_spec(clean_country_code)
    if spec is None:
        return PhoneValidationError(
            error=f"Invalid country code: {clean_country_code}"
        )

    length = len(clean_phone_number)
    if length < spec.min_length or length > spec.max_length:
        expected = (
            f"{spec.min_length}"
            if spec.min_length == spec.max_length
            else f"{spec.min_length}-{spec.max_length}"
        )
        return PhoneValidationError(
            error=(
                f"Invalid phone number length for "
                f"{_country_info(clean_country_code, spec)}. "
                f"Expected {expected} digits, got {length}"
            )
        )

    return PhoneValidationSuccess(
        formatted_number=f"+{clean_country_code}{clean_phone_number}",
        country_code=clean_country_code,
        national_number=clean_phone_number,
        length=length,
        countries=spec.countries,
    )


class PhoneValidator:
    """Raises domain errors for invalid or half-specified phone pairs."""

    def __init__(self, log: logging.Logger | None = None):
        self.logger = log or logger

    def ensure_valid_pair(
        self,
        country_code: PhoneInput,
        phone_number: PhoneInput,
        field: str = "phone number",
    ) -> PhoneValidationSuccess | None:
        """Validate a pair that may be absent.

        Returns:
            The success result, or None when both halves are blank.

        Raises:
            IncompletePhoneNumberError: If exactly one half is supplied.
            InvalidPhoneNumberError: If the pair fails validation.
        """
        code_blank = is_blank(country_code)
        number_blank = is_blank(phone_number)
        if code_blank and number_blank:
            return None
        if code_blank or number_blank:
            raise IncompletePhoneNumberError(field)

        result = validate_phone_number(country_code, phone_number)  # type: ignore[arg-type]
        if isinstance(result, PhoneValidationError):
            self.logger.info("Rejected %s: %s", field, result.error)
            raise InvalidPhoneNumberError(result.error, field)
        return result
