"""FastAPI dependencies for authentication."""

import logging
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from tourdesk.database.database import get_db
from tourdesk.database.user_repository import UserRepository
from tourdesk.auth.jwt import TokenError, TokenService, get_token_service
from tourdesk.auth.user_directory import UserDirectory
from tourdesk.errors import NotFound, Unauthorized
from tourdesk.models.user import User

logger = logging.getLogger(__name__)

TOKEN_REQUIRED = "Authorization token required"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token part of an Authorization header value.

    The first word is a scheme label and is not checked ("Bearer", "Token", ...);
    the second word is the token. Returns None if there is no second word.
    """
    parts = (authorization or "").split()
    if len(parts) < 2:
        return None
    return parts[1]


def get_user_directory(
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> UserDirectory:
    """Get a UserDirectory bound to the request's database session."""
    return UserDirectory(UserRepository(db), tokens)


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    directory: UserDirectory = Depends(get_user_directory),
) -> User:
    """Resolve the caller from the Authorization header.

    Args:
        authorization: Raw Authorization header value
        directory: User directory for the request

    Returns:
        User object

    Raises:
        Unauthorized: If the header is missing, the token is invalid or expired, or the user no longer exists
    """
    if not authorization or not authorization.strip():
        raise Unauthorized(TOKEN_REQUIRED)

    token = extract_bearer_token(authorization)
    if not token:
        logger.debug("Rejected request: Authorization header has no token")
        raise Unauthorized()

    try:
        user_id = directory.tokens.get_user_id_from_token(token)
    except TokenError as e:
        logger.debug(f"Rejected request: {type(e).__name__}")
        raise Unauthorized()

    try:
        return directory.get_by_id(user_id)
    except NotFound:
        logger.debug(f"Rejected request: token subject {user_id} has no user")
        raise Unauthorized()
