"""User directory: signup, login and lookup by id."""

import logging
import uuid
from datetime import datetime
from typing import Any, Mapping, Optional, Tuple

from tourdesk.auth.credential_policy import normalize_email, validate_signup
from tourdesk.auth.jwt import TokenService
from tourdesk.auth.passwords import burn_password_check, hash_password, verify_password
from tourdesk.database.user_repository import UserRepository
from tourdesk.errors import EmailTaken, InvalidCredentials, NotFound, ValidationFailed
from tourdesk.models.user import User

logger = logging.getLogger(__name__)


class UserDirectory:
    """Creates and authenticates users, issuing a token on success."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    def signup(self, fields: Mapping[str, Any]) -> Tuple[User, str]:
        """Register a new user.

        Returns:
            The created user and a token for it

        Raises:
            ValidationFailed: If the input breaks the credential policy
            EmailTaken: If the email is already registered
        """
        signup = validate_signup(fields)
        if self.users.get_by_email(signup.email):
            logger.info(f"Signup rejected, email already in use: {signup.email}")
            raise EmailTaken()

        now = datetime.utcnow()
        user = User(
            id=str(uuid.uuid4()),
            email=signup.email,
            name=signup.name,
            phone_number=signup.phone_number,
            gender=signup.gender,
            date_of_birth=signup.date_of_birth,
            membership_status=signup.membership_status,
            created_at=now,
            updated_at=now,
        )
        created = self.users.create(user, hash_password(signup.password))
        logger.info(f"Signed up user {created.id}")
        return created, self.tokens.create_access_token(created.id)

    def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        """Authenticate by email and password.

        An unknown email and a wrong password fail identically.

        Raises:
            ValidationFailed: If email or password is missing
            InvalidCredentials: If the credentials do not match a user
        """
        if not isinstance(email, str) or not email.strip() or not isinstance(password, str) or not password:
            raise ValidationFailed("All fields must be filled")

        user = self.users.get_by_email(normalize_email(email))
        password_hash = self.users.get_password_hash(user.id) if user else None
        if password_hash is None:
            burn_password_check(password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()
        if not verify_password(password, password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise InvalidCredentials()

        return user, self.tokens.create_access_token(user.id)

    def get_by_id(self, user_id: str) -> User:
        """Get a user by id.

        Raises:
            NotFound: If no such user exists
        """
        user = self.users.get(user_id)
        if not user:
            raise NotFound("No such user")
        return user
