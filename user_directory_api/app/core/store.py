"""
In-memory storage for user records.

``UserStore`` owns an ordered list of ``UserRecord`` objects together
with a monotonically increasing id counter.  Ids are never reused: the
counter starts one past the largest seeded id and only moves forward,
so deleting the newest user and creating another yields a fresh id.

Every public method takes the store lock for its whole read-modify-write
sequence.  Records are immutable; renaming swaps in a new record at the
same position so the collection order is preserved.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str


DEFAULT_USERS: Tuple[UserRecord, ...] = (
    UserRecord(id=1, name="Juan"),
    UserRecord(id=2, name="Ana"),
    UserRecord(id=3, name="Karen"),
    UserRecord(id=4, name="Luis"),
)


class UserStore:
    """Ordered in-memory collection of users."""

    def __init__(self, seed: Optional[Iterable[UserRecord]] = None) -> None:
        records = list(DEFAULT_USERS if seed is None else seed)
        ids = [record.id for record in records]
        if len(ids) != len(set(ids)):
            raise ValueError("Seed users must have unique ids")
        if any(user_id < 1 for user_id in ids):
            raise ValueError("User ids must be positive integers")
        self._users: List[UserRecord] = records
        self._next_id = max(ids, default=0) + 1
        self._lock = threading.Lock()
        logger.debug("User store initialised with %d users", len(records))

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def all(self) -> List[UserRecord]:
        """Return a snapshot of every user in insertion order."""
        with self._lock:
            return list(self._users)

    def get(self, user_id: int) -> Optional[UserRecord]:
        """Return the first user with ``user_id`` or ``None``."""
        with self._lock:
            index = self._index_of(user_id)
            return None if index is None else self._users[index]

    def add(self, name: str) -> UserRecord:
        """Append a new user and return it with its assigned id."""
        with self._lock:
            record = UserRecord(id=self._next_id, name=name)
            self._next_id += 1
            self._users.append(record)
            return record

    def rename(self, user_id: int, name: str) -> Optional[UserRecord]:
        """Replace the name of ``user_id``; ``None`` if it does not exist."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            updated = replace(self._users[index], name=name)
            self._users[index] = updated
            return updated

    def remove(self, user_id: int) -> Optional[UserRecord]:
        """Delete ``user_id`` and return the removed record, if any."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            return self._users.pop(index)

    def _index_of(self, user_id: int) -> Optional[int]:
        # Linear search; callers must hold the lock.
        for index, record in enumerate(self._users):
            if record.id == user_id:
                return index
        return None
