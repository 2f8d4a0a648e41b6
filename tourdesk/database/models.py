"""SQLAlchemy database models for tourdesk."""

from datetime import datetime
from typing import Union, TypeVar, Type
import uuid
from sqlalchemy import Column, String, Date, DateTime, ForeignKey

from tourdesk.database.database import Base
from tourdesk.models.constants import DEFAULT_MEMBERSHIP_STATUS
from tourdesk.models.user import Gender, MembershipStatus

T = TypeVar('T')


def enum_to_value(enum_obj: Union[str, T]) -> str:
    """Convert enum to string value (handles both enum and string).

    Args:
        enum_obj: Enum instance or string value

    Returns:
        String value of the enum, or the string itself if already a string
    """
    if hasattr(enum_obj, 'value'):
        return enum_obj.value
    return str(enum_obj)


def value_to_enum(value: str, enum_class: Type[T], default: T) -> T:
    """Convert string to enum with fallback to default."""
    if not value:
        return default
    try:
        return enum_class(value)
    except ValueError:
        return default


class UserDB(Base):
    """Database model for User."""

    __tablename__ = "users"

    # Primary key
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Credentials
    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)

    # Profile
    name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    membership_status = Column(String, nullable=False, default=DEFAULT_MEMBERSHIP_STATUS.value)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model (without the password hash)."""
        from tourdesk.models.user import User
        return User(
            id=self.id,
            email=self.email,
            name=self.name,
            phone_number=self.phone_number,
            gender=value_to_enum(self.gender, Gender, Gender.OTHER),
            date_of_birth=self.date_of_birth,
            membership_status=value_to_enum(self.membership_status, MembershipStatus, MembershipStatus.ACTIVE),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, user, password_hash: str):
        """Create database model from Pydantic model and a password hash."""
        return cls(
            id=user.id,
            email=user.email,
            password_hash=password_hash,
            name=user.name,
            phone_number=user.phone_number,
            gender=enum_to_value(user.gender),
            date_of_birth=user.date_of_birth,
            membership_status=enum_to_value(user.membership_status),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class TourDB(Base):
    """Database model for Tour."""

    __tablename__ = "tours"

    # Primary key
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Owner association (fixed at creation)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Descriptive fields
    name = Column(String, nullable=False)
    info = Column(String, nullable=False)
    image = Column(String, nullable=False)
    price = Column(String, nullable=False)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from tourdesk.models.tour import Tour
        return Tour(
            id=self.id,
            user_id=self.user_id,
            name=self.name,
            info=self.info,
            image=self.image,
            price=self.price,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_pydantic(cls, tour):
        """Create database model from Pydantic model."""
        return cls(
            id=tour.id,
            user_id=tour.user_id,
            name=tour.name,
            info=tour.info,
            image=tour.image,
            price=tour.price,
            created_at=tour.created_at,
            updated_at=tour.updated_at,
        )
