"""
Login form checks.

This is an input-shape gate only. It does not authenticate anyone: any
well-formed email with a long enough password is accepted.
"""

import re
from typing import Iterator

from notasapp.base_validator import BaseValidator, is_blank
from notasapp.settings import DEFAULT_MIN_PASSWORD_LENGTH
from notasapp.validation_result import ValidationResult

# Messages
MSG_EMAIL_EMPTY = "email must not be empty"
MSG_PASSWORD_EMPTY = "password must not be empty"
MSG_EMAIL_FORMAT = "invalid email format"
MSG_PASSWORD_SHORT = "password must be at least {length} characters"

# local@domain.tld with at least one dot in the domain and no whitespace
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

class CredentialValidator(BaseValidator):
    """Validates the email and password entered on the login screen.

    Checks run in this order: blank email, blank password, email format,
    password length.
    """

    def __init__(self, config: dict = None):
        """Initialize the credential validator

        Args:
            config (dict, optional): Configuration dictionary. Reads
                `min_password_length`.
        """
        super().__init__(config)
        self.min_password_length = self.config.get(
            "min_password_length",
            DEFAULT_MIN_PASSWORD_LENGTH,
        )

    def failures(self, email: str, password: str) -> Iterator[str]:
        if is_blank(email):
            yield MSG_EMAIL_EMPTY
        if is_blank(password):
            yield MSG_PASSWORD_EMPTY
        if not EMAIL_PATTERN.fullmatch(email):
            yield MSG_EMAIL_FORMAT
        if len(password) < self.min_password_length:
            yield MSG_PASSWORD_SHORT.format(length=self.min_password_length)

_default_validator = CredentialValidator()

def validate_login(email: str, password: str) -> ValidationResult:
    """Validate a login attempt with the default settings

    Args:
        email (str): Email as typed by the user
        password (str): Password as typed by the user

    Returns:
        ValidationResult: Result of the first failing check, or a passing result
    """
    return _default_validator.validate(email, password)
