"""Data validation utilities."""
from typing import Tuple

from src.models.attendee import EMAIL_PATTERN


def validate_name(name: str) -> Tuple[bool, str]:
    """
    Validate an attendee first or last name.

    Args:
        name: Name to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "姓名不可為空") if empty
        - (False, "姓名長度不可超過 50 字元") if too long
    """
    if not name or not name.strip():
        return False, "姓名不可為空"
    if len(name) > 50:
        return False, "姓名長度不可超過 50 字元"
    return True, ""


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate an email address.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Email 不可為空") if empty
        - (False, "Email 格式錯誤") if not shaped like user@host.tld
    """
    if not email or not email.strip():
        return False, "Email 不可為空"
    if not EMAIL_PATTERN.match(email.strip()):
        return False, "Email 格式錯誤"
    return True, ""


def validate_attendee_form(first_name: str, last_name: str, email: str) -> Tuple[bool, str]:
    """
    Validate the registration form fields in display order.

    Returns the first failure found, or (True, "").
    """
    for value in (first_name, last_name):
        is_valid, error_msg = validate_name(value)
        if not is_valid:
            return False, error_msg
    return validate_email(email)


def normalize_identity(identity: str) -> str:
    """
    Normalize a sign-in identity.

    Only surrounding whitespace is removed. Identities are matched
    case-sensitively, so " Alice " → "Alice" but never "alice".
    """
    return identity.strip()
