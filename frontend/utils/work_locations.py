"""
Per-day work location bookkeeping for team members.
"""
import threading
from datetime import date
from typing import Optional

from utils.models import Session

WORK_LOCATIONS = [
    ("office", "Office"),
    ("home", "Home Office"),
    ("urlaub", "Urlaub"),
    ("other", "Other"),
    ("", "-- None --"),
]

_VALID_LOCATIONS = {value for value, _ in WORK_LOCATIONS}


def today() -> str:
    """Local date as YYYY-MM-DD."""
    return date.today().isoformat()


def member_key(session: Session) -> str:
    """Team member id when linked, username otherwise."""
    return session.member_id or session.username


def location_label(value: str) -> str:
    for loc_value, label in WORK_LOCATIONS:
        if loc_value == value:
            return label
    return value


class WorkLocationBook:
    """
    Work locations keyed by (member key, day).

    One book is shared by every browser session of the app process, so
    updates are guarded by a lock.
    """

    def __init__(self):
        self._entries: dict[tuple[str, str], str] = {}
        self._lock = threading.Lock()

    def get(self, member: str, day: Optional[str] = None) -> str:
        """Location for ``member`` on ``day`` (today by default), "" if unset."""
        return self._entries.get((member, day or today()), "")

    def set(self, member: str, day: str, location: str) -> None:
        if location not in _VALID_LOCATIONS:
            raise ValueError(f"Unknown work location: {location!r}")
        with self._lock:
            if location:
                self._entries[(member, day)] = location
            else:
                self._entries.pop((member, day), None)

    def for_day(self, day: str) -> dict[str, str]:
        """All members with a location on ``day``."""
        with self._lock:
            return {member: loc for (member, d), loc in self._entries.items() if d == day}
