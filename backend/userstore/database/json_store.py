"""
JSON file storage for the credential collection.

The whole collection lives in one document. Reads parse the full file,
writes replace it atomically through a temp file and ``os.replace``.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from pydantic import ValidationError

from userstore.models.credential import Credential
from userstore.schemas.users import CredentialCollection

logger = logging.getLogger(__name__)


class CredentialStoreError(Exception):
    """Base error for credential storage failures."""


class StoreCorruptedError(CredentialStoreError):
    """Stored document exists but cannot be parsed as a collection."""


class StoreWriteError(CredentialStoreError):
    """Collection could not be written to disk."""


class JsonCredentialStore:
    """Durable storage of exactly one credential collection document."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._write_lock = threading.Lock()

    def fetch_all(self) -> list[Credential]:
        """
        Load the stored collection.

        Returns:
            Records in stored order, or an empty list if no document exists

        Raises:
            StoreCorruptedError: If the document is not a valid collection
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Cannot read credential file {self.path}: {e}")
            raise StoreCorruptedError(f"Unreadable credential file: {e}") from e

        try:
            return CredentialCollection.model_validate(raw).root
        except ValidationError as e:
            logger.error(f"Credential file {self.path} failed validation: {e}")
            raise StoreCorruptedError("Credential file is not a valid user list") from e

    def replace_all(self, collection: list[Credential]) -> None:
        """
        Overwrite the stored document with the given collection.

        Args:
            collection: Full collection; records not included are discarded

        Raises:
            StoreWriteError: If the document could not be written
        """
        payload = [record.to_document() for record in collection]

        with self._write_lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp = tempfile.mkstemp(
                    prefix=".tmp_", suffix=".json", dir=self.path.parent
                )
            except OSError as e:
                raise StoreWriteError(f"Cannot prepare {self.path}: {e}") from e

            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                    f.write("\n")
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp, self.path)
            except OSError as e:
                raise StoreWriteError(f"Cannot write {self.path}: {e}") from e
            finally:
                if os.path.exists(tmp):
                    os.remove(tmp)

        logger.info(f"Stored {len(payload)} credential records in {self.path}")
