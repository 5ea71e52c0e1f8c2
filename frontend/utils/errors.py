"""
Error kinds and operation results for authentication and user management.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class StorageError(Exception):
    """Base error for credential store transport failures."""


class StorageUnavailable(StorageError):
    """The collection could not be fetched or parsed."""


class StorageWriteFailed(StorageError):
    """The collection could not be written back."""


class AuthErrorKind(str, Enum):
    """Reasons an operation was denied or failed."""
    INVALID_CREDENTIALS = "invalid_credentials"
    NOT_AUTHENTICATED = "not_authenticated"
    NOT_AUTHORIZED = "not_authorized"
    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    DUPLICATE_USERNAME = "duplicate_username"
    PROTECTED_ACCOUNT = "protected_account"
    STORAGE_UNAVAILABLE = "storage_unavailable"
    STORAGE_WRITE_FAILED = "storage_write_failed"


ERROR_MESSAGES = {
    AuthErrorKind.INVALID_CREDENTIALS: "Invalid username or password",
    AuthErrorKind.NOT_AUTHENTICATED: "You must be logged in to do this",
    AuthErrorKind.NOT_AUTHORIZED: "Only admins can do this",
    AuthErrorKind.USER_NOT_FOUND: "User not found",
    AuthErrorKind.WRONG_PASSWORD: "Current password is incorrect",
    AuthErrorKind.DUPLICATE_USERNAME: "Username already exists",
    AuthErrorKind.PROTECTED_ACCOUNT: "Cannot change role for the main admin account",
    AuthErrorKind.STORAGE_UNAVAILABLE: "User data could not be loaded",
    AuthErrorKind.STORAGE_WRITE_FAILED: "Changes could not be saved, please try again",
}


class AuthResult(BaseModel):
    """Outcome of a manager operation."""
    ok: bool
    error: Optional[AuthErrorKind] = None
    message: str = ""
    must_change_password: bool = False

    @classmethod
    def success(cls, message: str = "", **kwargs) -> "AuthResult":
        return cls(ok=True, message=message, **kwargs)

    @classmethod
    def failure(cls, kind: AuthErrorKind, message: Optional[str] = None) -> "AuthResult":
        return cls(ok=False, error=kind, message=message or ERROR_MESSAGES[kind])

    def __bool__(self) -> bool:
        return self.ok
