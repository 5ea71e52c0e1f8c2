"""
Session and authorization manager.

Holds the credential collection loaded from the store, the current session,
and every role-gated operation on the collection. Each successful mutation
writes the whole collection back through the store. A failed write rolls
the in-memory state back so memory and storage never disagree.
"""
import logging
from typing import Optional, Union

from config import DEFAULT_PASSWORD
from utils.errors import AuthErrorKind, AuthResult, StorageError
from utils.models import Credential, Session, UserRole
from utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

# Reserved account whose role can never change
PROTECTED_USERNAME = "admin"


class AuthManager:
    """
    One per UI session. Constructed with a store exposing
    ``fetch_all()`` and ``replace_all(collection)``.
    """

    def __init__(
        self,
        store,
        default_password: str = DEFAULT_PASSWORD,
        hash_passwords: bool = True,
    ):
        self.store = store
        self.default_password = default_password
        self.hash_passwords = hash_passwords
        self.session: Optional[Session] = None
        self._credentials: list[Credential] = self._load()

    def _load(self) -> list[Credential]:
        try:
            return list(self.store.fetch_all())
        except StorageError as e:
            logger.warning(f"Starting with an empty user list: {e}")
            return []

    def _find_index(self, username: str) -> Optional[int]:
        for index, cred in enumerate(self._credentials):
            if cred.username == username:
                return index
        return None

    def _secret(self, password: str) -> str:
        return hash_password(password) if self.hash_passwords else password

    def _persist(self, updated: list[Credential], session: Optional[Session] = None) -> bool:
        """Adopt ``updated`` (and ``session``) then write it; undo both on failure."""
        previous, previous_session = self._credentials, self.session
        self._credentials = updated
        if session is not None:
            self.session = session
        try:
            self.store.replace_all(updated)
        except StorageError as e:
            actor = previous_session.username if previous_session else "anonymous"
            logger.error(f"Saving users for {actor} failed, changes discarded: {e}")
            self._credentials, self.session = previous, previous_session
            return False
        return True

    def _deny(self, kind: AuthErrorKind, operation: str) -> AuthResult:
        actor = self.session.username if self.session else "anonymous"
        logger.info(f"{operation} denied for {actor}: {kind.value}")
        return AuthResult.failure(kind)

    # --- Session

    def login(self, username: str, password: str) -> AuthResult:
        """
        Authenticate and open a session.

        Unknown users and wrong passwords give the same error. A default
        password does not block login, it only sets ``must_change_password``.
        """
        index = self._find_index(username)
        if index is None or not verify_password(password, self._credentials[index].password):
            logger.info("Rejected login attempt")
            return AuthResult.failure(AuthErrorKind.INVALID_CREDENTIALS)

        cred = self._credentials[index]
        self.session = Session(username=cred.username, role=cred.role, member_id=cred.member_id)
        logger.info(f"{cred.username} logged in")

        if cred.is_default_password:
            return AuthResult.success(
                "Please change your default password",
                must_change_password=True,
            )
        greeting = "Admin" if cred.role == UserRole.ADMIN else "User"
        return AuthResult.success(f"Welcome, {greeting}!")

    def logout(self) -> AuthResult:
        self.session = None
        return AuthResult.success("Logged out successfully")

    def is_authenticated(self) -> bool:
        return self.session is not None

    def is_admin(self) -> bool:
        return self.session is not None and self.session.is_admin

    def is_self(self, member_id: str) -> bool:
        """True if the logged-in user is linked to ``member_id``."""
        return (
            self.session is not None
            and self.session.member_id is not None
            and self.session.member_id == member_id
        )

    # --- Password lifecycle

    def change_password(self, current_password: str, new_password: str) -> AuthResult:
        if self.session is None:
            return self._deny(AuthErrorKind.NOT_AUTHENTICATED, "change_password")

        index = self._find_index(self.session.username)
        if index is None:
            return self._deny(AuthErrorKind.USER_NOT_FOUND, "change_password")

        if not verify_password(current_password, self._credentials[index].password):
            return self._deny(AuthErrorKind.WRONG_PASSWORD, "change_password")

        updated = list(self._credentials)
        updated[index] = updated[index].model_copy(
            update={"password": self._secret(new_password), "is_default_password": False}
        )
        if not self._persist(updated):
            return AuthResult.failure(AuthErrorKind.STORAGE_WRITE_FAILED)
        return AuthResult.success("Password changed successfully")

    def reset_user_password(self, username: str) -> AuthResult:
        """Admin override: set ``username`` back to the default password."""
        if not self.is_admin():
            return self._deny(AuthErrorKind.NOT_AUTHORIZED, "reset_user_password")

        index = self._find_index(username)
        if index is None:
            return self._deny(AuthErrorKind.USER_NOT_FOUND, "reset_user_password")

        updated = list(self._credentials)
        updated[index] = updated[index].model_copy(
            update={"password": self._secret(self.default_password), "is_default_password": True}
        )
        if not self._persist(updated):
            return AuthResult.failure(AuthErrorKind.STORAGE_WRITE_FAILED)
        return AuthResult.success(f"Password for {username} has been reset to the default password")

    # --- User administration

    def list_credentials(self) -> list[Credential]:
        """Full collection for admins, empty for everyone else."""
        if not self.is_admin():
            return []
        return list(self._credentials)

    def add_credential(
        self,
        username: str,
        password: str,
        role: Union[UserRole, str] = UserRole.USER,
        member_id: Optional[str] = None,
    ) -> AuthResult:
        if not self.is_admin():
            return self._deny(AuthErrorKind.NOT_AUTHORIZED, "add_credential")

        if self._find_index(username) is not None:
            return AuthResult.failure(
                AuthErrorKind.DUPLICATE_USERNAME,
                f'Username "{username}" already exists',
            )

        record = Credential(
            username=username,
            password=self._secret(password),
            role=UserRole(role),
            is_default_password=True,
            member_id=member_id,
        )
        if not self._persist([*self._credentials, record]):
            return AuthResult.failure(AuthErrorKind.STORAGE_WRITE_FAILED)
        logger.info(f"Added user {username} ({record.role.value})")
        return AuthResult.success(f"User {username} has been added")

    def update_role(self, username: str, role: Union[UserRole, str]) -> AuthResult:
        """
        Change a user's role.

        The reserved admin account is never changed. When the session
        belongs to ``username`` its role follows immediately.
        """
        if not self.is_admin():
            return self._deny(AuthErrorKind.NOT_AUTHORIZED, "update_role")

        if username == PROTECTED_USERNAME:
            return self._deny(AuthErrorKind.PROTECTED_ACCOUNT, "update_role")

        index = self._find_index(username)
        if index is None:
            return self._deny(AuthErrorKind.USER_NOT_FOUND, "update_role")

        role = UserRole(role)
        updated = list(self._credentials)
        updated[index] = updated[index].model_copy(update={"role": role})

        session = None
        if self.session.username == username:
            session = self.session.model_copy(update={"role": role})

        if not self._persist(updated, session=session):
            return AuthResult.failure(AuthErrorKind.STORAGE_WRITE_FAILED)
        return AuthResult.success(f"{username}'s role has been updated to {role.value}")

    def reload(self) -> AuthResult:
        """Re-read the collection from the store, keeping the session."""
        try:
            self._credentials = list(self.store.fetch_all())
        except StorageError as e:
            logger.warning(f"Reload failed, keeping current users: {e}")
            return AuthResult.failure(AuthErrorKind.STORAGE_UNAVAILABLE)
        return AuthResult.success(f"Loaded {len(self._credentials)} users")
