"""Tests for UserRepository and UserDirectory."""

import pytest

from tourdesk.auth.passwords import verify_password
from tourdesk.errors import EmailTaken, InvalidCredentials, NotFound, ValidationFailed


class TestUserRepository:
    """Test UserRepository lookups."""

    def test_get_and_get_by_email(self, user_repository, make_user):
        user = make_user("owner@example.com")

        assert user_repository.get(user.id).email == "owner@example.com"
        assert user_repository.get_by_email("owner@example.com").id == user.id
        assert user_repository.get("missing") is None
        assert user_repository.get_by_email("missing@example.com") is None

    def test_password_hash_is_stored_not_plaintext(self, user_repository, make_user):
        user = make_user("owner@example.com", password="R3g5T7#gh")

        stored = user_repository.get_password_hash(user.id)
        assert stored != "R3g5T7#gh"
        assert verify_password("R3g5T7#gh", stored)

    def test_create_duplicate_email_raises_email_taken(self, make_user):
        make_user("owner@example.com")
        with pytest.raises(EmailTaken):
            make_user("owner@example.com")


class TestSignup:
    """Test UserDirectory.signup()."""

    def test_signup_creates_user_and_token(self, user_directory, token_service, signup_payload):
        user, token = user_directory.signup(signup_payload)

        assert user.email == "testuser@example.com"
        assert user.membership_status == "Active"
        assert token_service.get_user_id_from_token(token) == user.id

    def test_signup_normalizes_email(self, user_directory, signup_payload):
        user, _ = user_directory.signup({**signup_payload, "email": "MiXeD@Example.com"})
        assert user.email == "mixed@example.com"

    def test_signup_rejects_duplicate_email_case_insensitively(self, user_directory, signup_payload):
        user_directory.signup(signup_payload)

        with pytest.raises(EmailTaken, match="Email already in use"):
            user_directory.signup({**signup_payload, "email": "TESTUSER@example.com"})

    def test_signup_validation_failure_creates_nothing(self, user_directory, user_repository, signup_payload):
        with pytest.raises(ValidationFailed):
            user_directory.signup({**signup_payload, "password": "weak"})

        assert user_repository.get_by_email(signup_payload["email"]) is None


class TestLogin:
    """Test UserDirectory.login()."""

    def test_login_with_valid_credentials(self, user_directory, token_service, signup_payload):
        created, _ = user_directory.signup(signup_payload)

        user, token = user_directory.login("TestUser@example.com", signup_payload["password"])

        assert user.id == created.id
        assert token_service.get_user_id_from_token(token) == created.id

    def test_wrong_password_and_unknown_email_fail_identically(self, user_directory, signup_payload):
        user_directory.signup(signup_payload)

        with pytest.raises(InvalidCredentials) as wrong_password:
            user_directory.login(signup_payload["email"], "WrongPassword123!")
        with pytest.raises(InvalidCredentials) as unknown_email:
            user_directory.login("nobody@example.com", signup_payload["password"])

        assert wrong_password.value.message == unknown_email.value.message

    @pytest.mark.parametrize("email,password", [(None, "R3g5T7#gh"), ("a@example.com", None), ("  ", "x")])
    def test_login_requires_both_fields(self, user_directory, email, password):
        with pytest.raises(ValidationFailed, match="All fields must be filled"):
            user_directory.login(email, password)


def test_get_by_id(user_directory, make_user):
    user = make_user()

    assert user_directory.get_by_id(user.id).id == user.id
    with pytest.raises(NotFound):
        user_directory.get_by_id("missing")
