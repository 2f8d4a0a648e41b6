"""Tests for signup validation rules."""

import pytest
from datetime import date

from tourdesk.auth.credential_policy import (
    is_valid_email,
    parse_date_of_birth,
    password_problems,
    validate_signup,
)
from tourdesk.errors import ValidationFailed
from tourdesk.models.user import Gender, MembershipStatus


class TestValidateSignup:
    """Test validate_signup() accept/reject behavior."""

    def test_accepts_valid_fields_and_normalizes(self, signup_payload):
        result = validate_signup({**signup_payload, "email": "  TestUser@Example.COM "})

        assert result.email == "testuser@example.com"
        assert result.gender == Gender.MALE
        assert result.membership_status == MembershipStatus.ACTIVE
        assert result.date_of_birth == date(1990, 1, 1)
        assert result.password == signup_payload["password"]

    def test_accepts_numeric_phone_number(self, signup_payload):
        result = validate_signup({**signup_payload, "phone_number": 1234567890})
        assert result.phone_number == "1234567890"

    @pytest.mark.parametrize("missing", [
        "email", "password", "name", "phone_number", "gender", "date_of_birth", "membership_status",
    ])
    def test_rejects_missing_field(self, signup_payload, missing):
        fields = {k: v for k, v in signup_payload.items() if k != missing}
        with pytest.raises(ValidationFailed, match="All fields must be filled"):
            validate_signup(fields)

    def test_rejects_blank_field(self, signup_payload):
        with pytest.raises(ValidationFailed, match="All fields must be filled"):
            validate_signup({**signup_payload, "name": "   "})

    def test_rejects_invalid_email(self, signup_payload):
        with pytest.raises(ValidationFailed, match="Email not valid"):
            validate_signup({**signup_payload, "email": "not-an-email"})

    @pytest.mark.parametrize("password", [
        "weak",          # too short, no uppercase, no digit, no special
        "r3g5t7#gh",     # no uppercase
        "RgTgh#Abc",     # no digit
        "R3g5t7Abc",     # no special character
        "R3#a",          # too short
    ])
    def test_rejects_weak_password(self, signup_payload, password):
        with pytest.raises(ValidationFailed, match="Password not strong enough"):
            validate_signup({**signup_payload, "password": password})

    @pytest.mark.parametrize("phone", ["123456789", "12345abcde", "123-456-7890"])
    def test_rejects_bad_phone_number(self, signup_payload, phone):
        with pytest.raises(ValidationFailed, match="Phone number"):
            validate_signup({**signup_payload, "phone_number": phone})

    def test_rejects_unknown_gender(self, signup_payload):
        with pytest.raises(ValidationFailed, match="Gender must be one of: Male, Female, Other"):
            validate_signup({**signup_payload, "gender": "Unknown"})

    def test_rejects_unknown_membership_status(self, signup_payload):
        with pytest.raises(ValidationFailed, match="Membership status"):
            validate_signup({**signup_payload, "membership_status": "Pending"})

    @pytest.mark.parametrize("value", ["not-a-date", "1990-13-01", "1990-02-30"])
    def test_rejects_bad_date_of_birth(self, signup_payload, value):
        with pytest.raises(ValidationFailed, match="Date of birth"):
            validate_signup({**signup_payload, "date_of_birth": value})


def test_password_problems_lists_each_broken_rule():
    assert password_problems("R3g5T7#gh") == []
    assert password_problems("abc") == [
        "at least 8 characters",
        "an uppercase letter",
        "a number",
        "a special character",
    ]


def test_email_grammar():
    assert is_valid_email("a.b+tag@sub.example.org") is True
    assert is_valid_email("user@localhost") is False
    assert is_valid_email("two@@example.com") is False
    assert is_valid_email("spaces in@example.com") is False


def test_internationalized_email_is_valid(signup_payload):
    assert is_valid_email("user@bücher.de") is True
    assert is_valid_email("josé@example.com") is True

    result = validate_signup({**signup_payload, "email": "José@Example.com"})
    assert result.email == "josé@example.com"


@pytest.mark.parametrize("password,problem", [
    ("Abcdef\u0663\u0664#", "a number"),     # Arabic-Indic digits
    ("\u00c1bcdef12#", "an uppercase letter"),  # accented capital
])
def test_non_ascii_characters_do_not_satisfy_rules(password, problem):
    assert password_problems(password) == [problem]


def test_parse_date_of_birth_accepts_iso_datetime():
    assert parse_date_of_birth("1995-03-10T00:00:00Z") == date(1995, 3, 10)
    assert parse_date_of_birth("yesterday") is None
