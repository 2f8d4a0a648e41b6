"""Request models for tour endpoints."""

from typing import Optional, Union
from pydantic import BaseModel, Field


class TourRequest(BaseModel):
    """Request body for creating (all fields required) or updating (any subset) a tour.

    There is no owner field: the owner is always the authenticated caller.
    """
    name: Optional[str] = Field(None, description="Tour name")
    info: Optional[str] = Field(None, description="Free-text description")
    image: Optional[str] = Field(None, description="Image reference")
    price: Optional[Union[str, int, float]] = Field(None, description="Price")
