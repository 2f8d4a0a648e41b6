"""Data models for tourdesk."""

from tourdesk.models.user import User, Gender, MembershipStatus
from tourdesk.models.tour import Tour

__all__ = [
    "User",
    "Gender",
    "MembershipStatus",
    "Tour",
]
