"""
Request and response schemas for API endpoints.
"""
from userstore.schemas.users import CredentialCollection, StatusResponse

__all__ = [
    "CredentialCollection",
    "StatusResponse",
]
