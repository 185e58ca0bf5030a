"""
User account model.

Users are synthesized per request and never persisted; the JSON
representation uses lower camelCase field names.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PLACEHOLDER_FIRST_NAME = "Jane"
PLACEHOLDER_LAST_NAME = "Doe"
PLACEHOLDER_EMAIL = "jane.doe@example.com"


class User(BaseModel):
    """
    Represents a user account within the business.

    Attributes:
        uuid: Unique identifier for the user.
        first_name: First name of the user.
        last_name: Last name of the user.
        email: Email address of the user.
        enabled: Whether the user's account is enabled.
        activated: Whether the user's account is activated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    uuid: UUID = Field(..., description="Unique identifier for the user")
    first_name: str = Field(..., description="First name of the user")
    last_name: str = Field(..., description="Last name of the user")
    email: str = Field(..., description="Email address of the user")
    enabled: bool = Field(..., description="Whether the user's account is enabled")
    activated: bool = Field(..., description="Whether the user's account is activated")

    @classmethod
    def placeholder(cls, user_id: UUID) -> "User":
        """Build the canned account record for ``user_id``."""
        return cls(
            uuid=user_id,
            first_name=PLACEHOLDER_FIRST_NAME,
            last_name=PLACEHOLDER_LAST_NAME,
            email=PLACEHOLDER_EMAIL,
            enabled=True,
            activated=True,
        )

    def to_json(self) -> str:
        """Serialize with camelCase field names."""
        return self.model_dump_json(by_alias=True)

    def __repr__(self) -> str:
        return f"<User(uuid={self.uuid}, email={self.email})>"
