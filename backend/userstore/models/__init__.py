"""
Pydantic models for stored documents.
"""
from userstore.models.credential import Credential, UserRole

__all__ = [
    "Credential",
    "UserRole",
]
