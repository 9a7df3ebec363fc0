import re
from typing import List, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

MAX_ORGANIZATION_NAME_LENGTH = 200
MAX_EMAIL_LENGTH = 254

EMAIL_PATTERN = re.compile(r'^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$')
TAG_PATTERN = re.compile(r'<[^>]*>')
CONTROL_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')


class ValidationError(Exception):
    """Raised when catalog data or session input is rejected"""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []

    def __str__(self):
        if not self.errors:
            return super().__str__()
        return f"{super().__str__()}: {'; '.join(self.errors)}"


def clean_text(raw: str) -> str:
    """Strip markup, control characters and surrounding whitespace from free text"""
    text = TAG_PATTERN.sub('', raw)
    text = CONTROL_PATTERN.sub('', text)
    return text.replace('<', '').replace('>', '').strip()


def validate_start_input(organization_name: str,
                         user_email: Optional[str] = None) -> Tuple[bool, List[str], str, Optional[str]]:
    """
    Check what a user types on the start page before an assessment begins.

    The organization name is required; the email is optional but must look
    like an address when given.

    Returns:
        Tuple of (is_valid, errors, cleaned organization name, normalized email or None)
    """
    errors = []

    name = clean_text(organization_name) if isinstance(organization_name, str) else ""
    if not name:
        errors.append("Organization name is required")
    elif len(name) > MAX_ORGANIZATION_NAME_LENGTH:
        errors.append(f"Organization name too long: {len(name)} > {MAX_ORGANIZATION_NAME_LENGTH}")

    email = None
    if user_email is not None:
        if not isinstance(user_email, str):
            errors.append("Email must be a string")
        elif user_email.strip():
            email = user_email.strip().lower()
            if len(email) > MAX_EMAIL_LENGTH:
                errors.append("Email address too long")
            elif not EMAIL_PATTERN.match(email):
                errors.append(f"Invalid email format: {email}")

    return len(errors) == 0, errors, name, email


def validate_and_raise(validation_result: Tuple[bool, Union[str, List[str], None]],
                       operation: str = "validation") -> None:
    """Turn an (is_valid, errors) pair into a ValidationError"""
    is_valid, errors = validation_result
    if is_valid:
        return

    if isinstance(errors, str):
        errors = [errors]
    errors = list(errors or [])

    logger.warning(f"{operation} failed: {errors}")
    raise ValidationError(f"{operation} failed", errors)
