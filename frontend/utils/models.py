"""
Client-side models for credentials and the authenticated session.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    """User role levels."""
    USER = "user"
    ADMIN = "admin"


class Credential(BaseModel):
    """A credential record as exchanged with the store."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str
    password: str
    role: UserRole = UserRole.USER
    is_default_password: bool = Field(default=True, alias="isDefaultPassword")
    member_id: Optional[str] = Field(None, alias="memberId")

    def to_document(self) -> dict:
        """Wire representation (camelCase keys, no null member link)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Session(BaseModel):
    """The identity currently logged in."""
    username: str
    role: UserRole
    member_id: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
