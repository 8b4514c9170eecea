"""
In‑memory record store for users.

The store keeps records in insertion order for the lifetime of the
process; nothing is persisted.  Positions returned by
``find_index_by_id`` are only valid while ``lock`` is held, since any
insert or removal shifts them.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass
class UserRecord:
    """A stored user.  ``id`` is assigned once at creation."""

    id: str
    name: Optional[str] = None
    age: Optional[Union[int, float]] = None


class UserStore:
    """Ordered collection of ``UserRecord`` objects."""

    def __init__(self) -> None:
        self._records: List[UserRecord] = []
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> List[UserRecord]:
        """Return a snapshot of all records in insertion order."""
        with self.lock:
            return list(self._records)

    def find_index_by_id(self, user_id: str) -> Optional[int]:
        """Return the position of the record with ``user_id`` or ``None``."""
        with self.lock:
            for index, record in enumerate(self._records):
                if record.id == user_id:
                    return index
            return None

    def insert(self, record: UserRecord) -> None:
        # Id freshness is the caller's responsibility.
        with self.lock:
            self._records.append(record)

    def replace_at(self, index: int, record: UserRecord) -> None:
        with self.lock:
            self._records[index] = record

    def remove_at(self, index: int) -> None:
        with self.lock:
            del self._records[index]
