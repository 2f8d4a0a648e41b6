"""Tour data model for tourdesk."""

from datetime import datetime
from pydantic import BaseModel, Field


class Tour(BaseModel):
    """Canonical Tour model."""

    id: str = Field(..., description="Unique tour identifier (UUID v4)")
    user_id: str = Field(..., description="User ID who owns this tour")
    name: str = Field(..., description="Tour name")
    info: str = Field(..., description="Free-text tour description")
    image: str = Field(..., description="Image reference (file name or URL)")
    price: str = Field(..., description="Tour price as entered by the owner")
    created_at: datetime = Field(..., description="Tour creation timestamp")
    updated_at: datetime = Field(..., description="Tour last update timestamp")
