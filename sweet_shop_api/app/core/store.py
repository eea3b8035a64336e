"""
In‑memory record store.

``RecordStore`` keeps records of a single type in insertion order and
offers the handful of operations the services need: create, lookup by
id, shallow merge update and delete.  Lookups are linear scans; the
collections are small and live only as long as the process.

``Database`` owns one store per collection.  ``create_app`` builds a
single instance and the services receive it explicitly, so replacing
it with a persistent backend means providing another object with the
same methods.

Every store operation takes the store's re‑entrant ``lock``.  Services
that read a record, check it and then write it back (purchase,
restock, registration) hold the same lock across the whole sequence.
"""

import itertools
import threading
import uuid
from dataclasses import replace
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from ..models import Sweet, User

T = TypeVar("T")


def sequential_ids(start: int = 1) -> Callable[[], str]:
    """Return an id factory yielding ``"1"``, ``"2"``, ... ."""
    counter = itertools.count(start)
    return lambda: str(next(counter))


def uuid_ids() -> str:
    return str(uuid.uuid4())


class RecordStore(Generic[T]):
    """Ordered collection of records that have a string ``id`` attribute."""

    def __init__(self, record_type: Type[T], id_factory: Callable[[], str]) -> None:
        self.record_type = record_type
        self._id_factory = id_factory
        self._records: List[T] = []
        self.lock = threading.RLock()

    def create(self, fields: Dict[str, Any]) -> T:
        """Assign a fresh id, store the record and return it."""
        with self.lock:
            record_id = self._id_factory()
            # Ids handed out by ``insert`` may collide with the factory.
            while self._index_of(record_id) != -1:
                record_id = self._id_factory()
            record = self.record_type(id=record_id, **fields)
            self._records.append(record)
            return record

    def insert(self, record: T) -> T:
        """Store a record that already carries its id (used for seeding)."""
        with self.lock:
            self._records.append(record)
            return record

    def find_all(self) -> List[T]:
        """Return the live list of records.

        The list is shared with the store; later mutations are visible
        through it.  Copy it if you need a snapshot.
        """
        return self._records

    def find_by_id(self, record_id: str) -> Optional[T]:
        with self.lock:
            index = self._index_of(record_id)
            return self._records[index] if index != -1 else None

    def find_one(self, **criteria: Any) -> Optional[T]:
        """Return the first record whose attributes equal ``criteria``."""
        with self.lock:
            for record in self._records:
                if all(getattr(record, key) == value for key, value in criteria.items()):
                    return record
            return None

    def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[T]:
        """Merge ``fields`` onto the stored record.

        Only the given keys are overwritten.  Returns the updated record,
        or ``None`` if no record has ``record_id``.
        """
        with self.lock:
            index = self._index_of(record_id)
            if index == -1:
                return None
            fields = {key: value for key, value in fields.items() if key != "id"}
            self._records[index] = replace(self._records[index], **fields)
            return self._records[index]

    def delete(self, record_id: str) -> bool:
        with self.lock:
            index = self._index_of(record_id)
            if index == -1:
                return False
            del self._records[index]
            return True

    def count(self) -> int:
        with self.lock:
            return len(self._records)

    def clear(self) -> None:
        with self.lock:
            self._records.clear()

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1


class Database:
    """Owner of the application's collections."""

    def __init__(self) -> None:
        self.sweets: RecordStore[Sweet] = RecordStore(Sweet, sequential_ids())
        self.users: RecordStore[User] = RecordStore(User, uuid_ids)

    def reset(self) -> None:
        """Drop all sweets and users."""
        self.sweets.clear()
        self.users.clear()
