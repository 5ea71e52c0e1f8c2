"""
Credential record model for the users document.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """User role levels."""
    USER = "user"
    ADMIN = "admin"


class Credential(BaseModel):
    """
    One entry of the stored credential collection.

    Wire keys are camelCase to stay compatible with documents written by
    earlier clients; attributes are snake_case.
    """
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., description="Password or password hash")
    role: UserRole = Field(default=UserRole.USER, description="Access level")
    is_default_password: bool = Field(
        default=True,
        alias="isDefaultPassword",
        description="True while the password is the reset value",
    )
    member_id: Optional[str] = Field(
        None,
        alias="memberId",
        description="Link to a team member identity",
    )

    def to_document(self) -> dict:
        """Serialize with wire keys, omitting an absent member link."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
