"""Constants for tourdesk.

This module centralizes the validation limits and fixed field sets used throughout the application.
"""

from tourdesk.models.user import MembershipStatus


# Password policy
MIN_PASSWORD_LENGTH = 8

# Phone numbers
MIN_PHONE_DIGITS = 10

# User defaults
DEFAULT_MEMBERSHIP_STATUS = MembershipStatus.ACTIVE

# Signup fields that must be present (password is checked separately)
REQUIRED_SIGNUP_FIELDS = (
    "email",
    "password",
    "name",
    "phone_number",
    "gender",
    "date_of_birth",
    "membership_status",
)

# Tour fields supplied by the owner; all are required on create and patchable on update
TOUR_FIELDS = ("name", "info", "image", "price")
