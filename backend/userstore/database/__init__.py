"""
Database module - JSON document storage for credentials.
"""
from userstore.database.connections import get_store, close_store
from userstore.database.json_store import (
    CredentialStoreError,
    JsonCredentialStore,
    StoreCorruptedError,
    StoreWriteError,
)

__all__ = [
    "get_store",
    "close_store",
    "CredentialStoreError",
    "JsonCredentialStore",
    "StoreCorruptedError",
    "StoreWriteError",
]
