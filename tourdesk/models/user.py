"""User data model for tourdesk."""

from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Gender enumeration."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class MembershipStatus(str, Enum):
    """Membership status enumeration."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUSPENDED = "Suspended"


class User(BaseModel):
    """User model for tourdesk.

    The password hash lives only on the database row and is never part of this model.
    """

    id: str = Field(..., description="Unique user identifier (UUID v4)")
    email: str = Field(..., description="User email address (lower-cased)")
    name: str = Field(..., description="User display name")
    phone_number: str = Field(..., description="Phone number (digits only)")
    gender: Gender = Field(..., description="Gender")
    date_of_birth: date = Field(..., description="Date of birth")
    membership_status: MembershipStatus = Field(MembershipStatus.ACTIVE, description="Membership status")
    created_at: datetime = Field(..., description="User creation timestamp")
    updated_at: datetime = Field(..., description="User last update timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
