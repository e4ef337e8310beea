"""
Input Rules

Field-level checks shared by use cases. Each validator returns a dict of
field name -> list of messages; an empty dict means the input is valid.
"""

import re
import secrets
from typing import Dict, List, Optional

from email_validator import EmailNotValidError, validate_email

from config import ApplicationConfig

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
FAMILY_NAME_MIN_LENGTH = 3
FAMILY_NAME_MAX_LENGTH = 255
BCRYPT_MAX_BYTES = 72

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"\d")


def _add(errors: Dict[str, List[str]], field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def validate_email_address(email: Optional[str]) -> List[str]:
    if not email:
        return ["The email field is required."]
    messages = []
    if len(email) > EMAIL_MAX_LENGTH:
        messages.append(f"The email may not be greater than {EMAIL_MAX_LENGTH} characters.")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        messages.append("The email must be a valid email address.")
    return messages


def validate_password(password: Optional[str], confirmation: Optional[str]) -> List[str]:
    if not password:
        return ["The password field is required."]

    messages = []
    min_length = ApplicationConfig.PASSWORD_MIN_LENGTH
    if len(password) < min_length:
        messages.append(f"The password must be at least {min_length} characters.")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        messages.append(f"The password may not be greater than {BCRYPT_MAX_BYTES} bytes.")
    if not _LETTER.search(password) or not _DIGIT.search(password):
        messages.append("The password must contain at least one letter and one number.")
    if password != confirmation:
        messages.append("The password confirmation does not match.")
    return messages


def validate_registration(
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    password_confirmation: Optional[str],
) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}

    if not name or not name.strip():
        _add(errors, "name", "The name field is required.")
    elif len(name) > NAME_MAX_LENGTH:
        _add(errors, "name", f"The name may not be greater than {NAME_MAX_LENGTH} characters.")

    for message in validate_email_address(email):
        _add(errors, "email", message)
    for message in validate_password(password, password_confirmation):
        _add(errors, "password", message)

    return errors


def validate_family_name(name: Optional[str]) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    stripped = (name or "").strip()
    if not stripped:
        _add(errors, "name", "The name field is required.")
    elif len(stripped) < FAMILY_NAME_MIN_LENGTH:
        _add(errors, "name", f"The name must be at least {FAMILY_NAME_MIN_LENGTH} characters.")
    elif len(stripped) > FAMILY_NAME_MAX_LENGTH:
        _add(
            errors,
            "name",
            f"The name may not be greater than {FAMILY_NAME_MAX_LENGTH} characters.",
        )
    return errors


def generate_invitation_code() -> str:
    """8 uppercase hex characters from 32 random bits"""
    return secrets.token_bytes(4).hex().upper()
