"""
Pydantic models for the user service.
"""

from user_service.models.user import (
    PLACEHOLDER_EMAIL,
    PLACEHOLDER_FIRST_NAME,
    PLACEHOLDER_LAST_NAME,
    User,
)

__all__ = [
    "PLACEHOLDER_EMAIL",
    "PLACEHOLDER_FIRST_NAME",
    "PLACEHOLDER_LAST_NAME",
    "User",
]
