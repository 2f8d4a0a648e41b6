"""JWT token generation and validation for tourdesk."""

import jwt
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Dict

from tourdesk.config import Settings, get_settings


class TokenError(Exception):
    """Base class for rejected tokens."""


class TokenExpired(TokenError):
    """Token signature is valid but its expiration has passed."""


class TokenBadSignature(TokenError):
    """Token was not signed with this service's secret."""


class TokenMalformed(TokenError):
    """Token cannot be decoded or lacks the required claims."""


class TokenService:
    """Issues and verifies signed, time-limited identity tokens."""

    def __init__(self, settings: Settings):
        self._secret = settings.jwt_secret_key
        self._algorithm = settings.jwt_algorithm
        self._lifetime = timedelta(hours=settings.jwt_expiration_hours)

    def create_access_token(self, user_id: str) -> str:
        """Create a JWT access token for a user.

        Args:
            user_id: User ID to encode in token

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,  # Subject (user ID)
            "iat": now,  # Issued at
            "exp": now + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> Dict:
        """Decode and validate a JWT access token.

        Args:
            token: JWT token string to decode

        Returns:
            Decoded token payload

        Raises:
            TokenExpired: If the token has expired
            TokenBadSignature: If the signature does not match the configured secret
            TokenMalformed: If the token cannot be decoded
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpired(str(e)) from e
        except jwt.InvalidSignatureError as e:
            raise TokenBadSignature(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise TokenMalformed(str(e)) from e

    def get_user_id_from_token(self, token: str) -> str:
        """Extract user ID from a JWT token.

        Raises:
            TokenError: If the token is invalid or its subject is not a non-empty string
        """
        user_id = self.decode_access_token(token).get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise TokenMalformed("Token subject must be a non-empty string")
        return user_id


@lru_cache()
def get_token_service() -> TokenService:
    """Get the process-wide TokenService (dependency for FastAPI)."""
    return TokenService(get_settings())
