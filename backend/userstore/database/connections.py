"""
Store instance management.
"""
from typing import Optional

from userstore.config import get_settings
from userstore.database.json_store import JsonCredentialStore

# Global store instance
_store: Optional[JsonCredentialStore] = None


def get_store() -> JsonCredentialStore:
    """Get or create the credential store for the configured data file."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = JsonCredentialStore(settings.data_file)
    return _store


def close_store():
    """Drop the store instance so the next call re-reads configuration."""
    global _store
    _store = None
