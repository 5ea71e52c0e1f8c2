from typing import Optional

import requests
from pydantic import ValidationError

from utils.errors import StorageUnavailable, StorageWriteFailed
from utils.models import Credential


class StoreClient:
    """HTTP client for the credential store's fetch-all/replace-all protocol."""

    def __init__(self, base_url: str, timeout: float = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # Any object with requests-style get/post
        self.session = session or requests.Session()

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/users"

    def _parse_json(self, resp) -> Optional[object]:
        """Parse JSON body, None when empty or not JSON."""
        if resp is None or not resp.text:
            return None
        try:
            return resp.json()
        except ValueError:
            return None

    def fetch_all(self) -> list[Credential]:
        """
        Fetch the full stored collection.

        Raises:
            StorageUnavailable: If the store cannot be reached or answers garbage
        """
        try:
            resp = self.session.get(
                self.users_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise StorageUnavailable(f"Cannot connect to credential store: {e}") from e

        if resp.status_code != 200:
            raise StorageUnavailable(f"Credential store answered {resp.status_code}")

        data = self._parse_json(resp)
        if not isinstance(data, list):
            raise StorageUnavailable("Credential store did not return a user list")
        try:
            return [Credential.model_validate(item) for item in data]
        except ValidationError as e:
            raise StorageUnavailable(f"Malformed credential record: {e}") from e

    def replace_all(self, collection: list[Credential]) -> None:
        """
        Overwrite the stored collection.

        Raises:
            StorageWriteFailed: If the store did not acknowledge the write
        """
        try:
            resp = self.session.post(
                self.users_url,
                json=[record.to_document() for record in collection],
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise StorageWriteFailed(f"Cannot connect to credential store: {e}") from e

        if resp.status_code != 200:
            raise StorageWriteFailed(f"Credential store answered {resp.status_code}")
