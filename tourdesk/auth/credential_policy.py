"""Signup validation rules: email format, password strength, profile fields."""

import string
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from tourdesk.errors import ValidationFailed
from tourdesk.models.constants import MIN_PASSWORD_LENGTH, MIN_PHONE_DIGITS, REQUIRED_SIGNUP_FIELDS
from tourdesk.models.user import Gender, MembershipStatus


@dataclass(frozen=True)
class SignupFields:
    """Normalized, validated signup input."""
    email: str
    password: str
    name: str
    phone_number: str
    gender: Gender
    date_of_birth: date
    membership_status: MembershipStatus


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    """Check address syntax (internationalized addresses included); no DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def password_problems(password: str) -> List[str]:
    """Return the password rules that password breaks (empty if it is strong enough).

    Uppercase and digit rules count ASCII characters only.
    """
    problems = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"at least {MIN_PASSWORD_LENGTH} characters")
    if not any(ch in string.ascii_uppercase for ch in password):
        problems.append("an uppercase letter")
    if not any(ch in string.digits for ch in password):
        problems.append("a number")
    if all(ch.isalnum() for ch in password):
        problems.append("a special character")
    return problems


def parse_date_of_birth(value: str) -> Optional[date]:
    """Parse an ISO calendar date; an ISO datetime is truncated to its date."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def validate_signup(fields: Mapping[str, Any]) -> SignupFields:
    """Validate signup input and return it normalized.

    The password is taken as-is (not stripped); every other field is stripped.

    Raises:
        ValidationFailed: On the first rule the input breaks
    """
    password = fields.get("password")
    values = {name: _text(fields.get(name)) for name in REQUIRED_SIGNUP_FIELDS if name != "password"}
    if not isinstance(password, str) or not password or any(v is None for v in values.values()):
        raise ValidationFailed("All fields must be filled")

    email = normalize_email(values["email"])
    if not is_valid_email(email):
        raise ValidationFailed("Email not valid")

    problems = password_problems(password)
    if problems:
        raise ValidationFailed(f"Password not strong enough: must contain {', '.join(problems)}")

    phone_number = values["phone_number"]
    if not phone_number.isdigit() or not phone_number.isascii() or len(phone_number) < MIN_PHONE_DIGITS:
        raise ValidationFailed(f"Phone number must be at least {MIN_PHONE_DIGITS} digits")

    try:
        gender = Gender(values["gender"])
    except ValueError:
        allowed = ", ".join(g.value for g in Gender)
        raise ValidationFailed(f"Gender must be one of: {allowed}")

    try:
        membership_status = MembershipStatus(values["membership_status"])
    except ValueError:
        allowed = ", ".join(s.value for s in MembershipStatus)
        raise ValidationFailed(f"Membership status must be one of: {allowed}")

    date_of_birth = parse_date_of_birth(values["date_of_birth"])
    if date_of_birth is None:
        raise ValidationFailed("Date of birth must be a valid date (YYYY-MM-DD)")

    return SignupFields(
        email=email,
        password=password,
        name=values["name"],
        phone_number=phone_number,
        gender=gender,
        date_of_birth=date_of_birth,
        membership_status=membership_status,
    )
