"""Request/response models for user endpoints."""

from typing import Optional, Union
from pydantic import BaseModel, Field

from tourdesk.models.user import User


class SignupRequest(BaseModel):
    """Request model for signup.

    Fields are optional here so that missing values are reported by the
    credential policy as a 400 with a readable message.
    """
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plaintext password")
    name: Optional[str] = Field(None, description="Display name")
    phone_number: Optional[Union[str, int]] = Field(None, description="Phone number, digits only")
    gender: Optional[str] = Field(None, description="Male, Female or Other")
    date_of_birth: Optional[str] = Field(None, description="Date of birth (YYYY-MM-DD)")
    membership_status: Optional[str] = Field(None, description="Active, Inactive or Suspended")


class LoginRequest(BaseModel):
    """Request model for login."""
    email: Optional[str] = Field(None, description="Email address")
    password: Optional[str] = Field(None, description="Plaintext password")


class AuthResponse(BaseModel):
    """Response model for signup and login."""
    token: str
    user: User
