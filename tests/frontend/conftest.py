"""
Frontend test fixtures and fakes.

Provides an in-memory credential store and AuthManager factories so the
manager can be tested without a running backend.
"""
import pytest


class FakeStore:
    """In-memory stand-in for StoreClient."""

    def __init__(self, documents=None):
        self.documents = [dict(d) for d in (documents or [])]
        self.fetch_error = None
        self.write_error = None
        self.writes = 0

    def fetch_all(self):
        from utils.models import Credential

        if self.fetch_error is not None:
            raise self.fetch_error
        return [Credential.model_validate(d) for d in self.documents]

    def replace_all(self, collection):
        if self.write_error is not None:
            raise self.write_error
        self.documents = [c.to_document() for c in collection]
        self.writes += 1

    def find(self, username):
        return next((d for d in self.documents if d["username"] == username), None)


@pytest.fixture
def fake_store(credential_documents):
    """Fake store holding the shared sample collection."""
    return FakeStore(credential_documents)


@pytest.fixture
def make_manager():
    """Factory building an AuthManager over a store, plaintext by default."""
    from utils.auth_manager import AuthManager

    def _make(store, **kwargs):
        kwargs.setdefault("default_password", "Hallo123")
        kwargs.setdefault("hash_passwords", False)
        return AuthManager(store, **kwargs)
    return _make


@pytest.fixture
def manager(fake_store, make_manager):
    """Manager with nobody logged in."""
    return make_manager(fake_store)


@pytest.fixture
def admin_manager(manager):
    """Manager with the stock admin logged in."""
    assert manager.login("admin", "Hallo123").ok
    return manager


@pytest.fixture
def user_manager(manager):
    """Manager with a regular user logged in."""
    assert manager.login("alice", "wonderland").ok
    return manager


@pytest.fixture
def store_factory():
    """The FakeStore class, for tests that need a custom collection."""
    return FakeStore
