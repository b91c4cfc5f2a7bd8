"""
Identity service - account field validation and name formatting
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from dormdash.config import get_config
from dormdash.infrastructure.utilities.constants import NameRules, PasswordRules, PhoneFormat

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

PASSWORD_TOO_SHORT = f"Password must be at least {PasswordRules.MIN_LENGTH} characters"
PASSWORD_NO_UPPERCASE = "Password must contain an uppercase letter"
PASSWORD_NO_LOWERCASE = "Password must contain a lowercase letter"
PASSWORD_NO_DIGIT = "Password must contain a number"


@dataclass(frozen=True)
class PasswordValidation:
    """Outcome of a password strength check"""

    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0


def is_valid_email(email: str) -> bool:
    """local@domain.tld shape without whitespace"""
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_institutional_email(email: str, suffixes: Optional[Iterable[str]] = None) -> bool:
    """
    Exact, case-insensitive suffix match against the allow-list.

    Suffixes include the ``@`` so ``user@evil-upenn.edu`` does not pass as
    ``@upenn.edu``.
    """
    if suffixes is None:
        suffixes = get_config().institutional_email_suffixes
    lowered = email.lower()
    return any(lowered.endswith(suffix.lower()) for suffix in suffixes)


def is_valid_password(password: str) -> PasswordValidation:
    """Check every rule and report all failures"""
    errors = []

    if len(password) < PasswordRules.MIN_LENGTH:
        errors.append(PASSWORD_TOO_SHORT)
    if not re.search(r"[A-Z]", password):
        errors.append(PASSWORD_NO_UPPERCASE)
    if not re.search(r"[a-z]", password):
        errors.append(PASSWORD_NO_LOWERCASE)
    if not re.search(r"[0-9]", password):
        errors.append(PASSWORD_NO_DIGIT)

    return PasswordValidation(errors)


def passwords_match(password: str, confirmation: str) -> bool:
    return password == confirmation


def is_valid_name(name: str) -> bool:
    return len(name.strip()) >= NameRules.MIN_LENGTH


def format_display_name(first_name: str, last_name: str) -> str:
    return f"{first_name.strip()} {last_name.strip()}"


def get_initials(first_name: str, last_name: str) -> str:
    """Uppercased first letters; a blank name contributes nothing"""
    first = first_name.strip()[:1]
    last = last_name.strip()[:1]
    return (first + last).upper()


def format_phone_number(text: str) -> str:
    """Progressively format typed digits as 123-456-7890"""
    digits = re.sub(r"[^0-9]", "", text)[: PhoneFormat.MAX_DIGITS]

    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}-{digits[3:]}"
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


@dataclass(frozen=True)
class RegistrationForm:
    """Sign-up form contents"""

    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str


def validate_registration_form(form: RegistrationForm) -> List[str]:
    """Collect every problem with a sign-up form"""
    errors = []

    if not is_valid_email(form.email):
        errors.append("Invalid email format")
    elif not is_institutional_email(form.email):
        errors.append("Must use a Penn email address")

    errors.extend(is_valid_password(form.password).errors)

    if not passwords_match(form.password, form.confirm_password):
        errors.append("Passwords do not match")
    if not is_valid_name(form.first_name):
        errors.append(f"First name must be at least {NameRules.MIN_LENGTH} characters")
    if not is_valid_name(form.last_name):
        errors.append(f"Last name must be at least {NameRules.MIN_LENGTH} characters")

    return errors
