"""Custom exceptions for identity resolution and authentication."""


class BadInputError(ValueError):
    """Base class for user-correctable input errors."""

    pass


class InvalidPhoneNumberError(BadInputError):
    """Raised when a phone number fails numbering-plan validation."""

    def __init__(self, reason: str, field: str = "phone number"):
        self.reason = reason
        self.field = field
        super().__init__(f"Invalid {field}: {reason}")


class IncompletePhoneNumberError(BadInputError):
    """Raised when only one half of a country code / number pair is given."""

    def __init__(self, field: str = "phone number"):
        self.field = field
        super().__init__(f"Country code and {field} must be provided together")


class MissingIdentifierError(BadInputError):
    """Raised when sign-up carries no identifier to derive an identity from."""

    def __init__(self):
        super().__init__(
            "At least one of email, username, phone number or "
            "whatsapp phone number is required"
        )


class InvalidEmailError(BadInputError):
    """Raised when an email has nothing before the "@"."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email: {email!r}")


class ConflictError(ValueError):
    """Base class for identifiers that are already registered."""

    domain: str = "identifier"


class EmailAlreadyExistsError(ConflictError):
    domain = "email"

    def __init__(self):
        super().__init__("email already exists")


class UsernameAlreadyExistsError(ConflictError):
    domain = "username"

    def __init__(self):
        super().__init__("username already exists")


class PhoneNumberAlreadyExistsError(ConflictError):
    domain = "phone_number"

    def __init__(self):
        super().__init__("phone number already exists")


class WhatsappPhoneNumberAlreadyExistsError(ConflictError):
    domain = "whatsapp_phone_number"

    def __init__(self):
        super().__init__("whatsapp phone number already exists")


class WhatsappPhoneNumberRegisteredAsPhoneError(ConflictError):
    """Raised when a WhatsApp number is another user's plain phone number."""

    domain = "whatsapp_phone_number"

    def __init__(self):
        super().__init__("whatsapp phone number already exists as phone number")


class UserAlreadyExistsError(ConflictError):
    """Raised when the store rejects an insert on a unique index."""

    def __init__(self):
        super().__init__("user already exists")


class UnauthorizedError(ValueError):
    """Base class for authentication failures."""

    pass


class InvalidCredentialsError(UnauthorizedError):
    """Raised when the identifier is unknown or the password is wrong."""

    def __init__(self):
        super().__init__("Invalid credentials")


class VerificationError(RuntimeError):
    """Base class for failures of the out-of-band verification provider."""

    pass


class VerificationNotConfiguredError(VerificationError):
    """Raised when the verification provider credentials are missing."""

    def __init__(self):
        super().__init__("Verification service is not configured")


class VerificationSendError(VerificationError):
    """Raised when the provider refuses or fails to send a verification."""

    def __init__(self):
        super().__init__("Could not send verification email")
