"""Repository for User database operations."""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tourdesk.errors import EmailTaken
from tourdesk.models.user import User
from tourdesk.database.models import UserDB

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        user_db = self.db.query(UserDB).filter(UserDB.id == user_id).first()
        return user_db.to_pydantic() if user_db else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (already normalized) email."""
        user_db = self.db.query(UserDB).filter(UserDB.email == email).first()
        return user_db.to_pydantic() if user_db else None

    def get_password_hash(self, user_id: str) -> Optional[str]:
        """Get the stored password hash for a user."""
        row = self.db.query(UserDB.password_hash).filter(UserDB.id == user_id).first()
        return row[0] if row else None

    def create(self, user: User, password_hash: str) -> User:
        """Create a new user.

        Raises:
            EmailTaken: If another user registered the same email first
        """
        try:
            user_db = UserDB.from_pydantic(user, password_hash)
            self.db.add(user_db)
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Created user {user.id}: {user.email}")
            return user_db.to_pydantic()
        except IntegrityError as e:
            self.db.rollback()
            if self.get_by_email(user.email):
                logger.info(f"Signup lost race for email {user.email}")
                raise EmailTaken()
            logger.error(f"Failed to create user {user.id}: {type(e).__name__}: {str(e)}")
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create user {user.id}: {type(e).__name__}: {str(e)}")
            raise
