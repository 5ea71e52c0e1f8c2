"""
Users endpoint request/response schemas.
"""
from collections import Counter

from pydantic import BaseModel, Field, RootModel, model_validator

from userstore.models.credential import Credential


def duplicate_usernames(collection: list[Credential]) -> list[str]:
    """Usernames that occur more than once, in first-seen order."""
    counts = Counter(record.username for record in collection)
    return [name for name, count in counts.items() if count > 1]


class CredentialCollection(RootModel[list[Credential]]):
    """Full credential collection, the unit of persistence."""

    @model_validator(mode="after")
    def check_unique_usernames(self):
        duplicates = duplicate_usernames(self.root)
        if duplicates:
            raise ValueError(f"Duplicate usernames: {', '.join(duplicates)}")
        return self


class StatusResponse(BaseModel):
    """Acknowledgement returned after a write."""
    status: str = Field(default="ok", description="Write status")
