"""
In-memory record store.

Records are kept unique by their `identity` (name, email, age). Ids come from
an `IdCounter` owned by the store, so building a store has no global side
effects and tests can start from a known id.

Usage:
    from record_tracker.store import RecordStore
    from record_tracker.domain.models import Key

    store = RecordStore()
    store.add_record(store.new_record("Alice", "alice@example.com", 30))
    store.query_by_key(Key.NAME, "Alice")
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Set, Tuple

from record_tracker.domain.models import (
    AgeQuery,
    EmailQuery,
    IdQuery,
    Key,
    NameQuery,
    Query,
    Record,
)
from record_tracker.errors import TypeMismatchError
from record_tracker.utils.logging import get_logger

log = get_logger(__name__)


class IdCounter:
    """Monotonically increasing id source; ids are never reused."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("IdCounter start must be non-negative")
        self._next = start

    @property
    def peek(self) -> int:
        """The id the next call to `next_id` will return."""
        return self._next

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


class RecordStore:
    """
    Unordered collection of unique records with typed-key lookup.
    """

    def __init__(self, counter: IdCounter | None = None) -> None:
        self._counter = counter or IdCounter()
        self._records: Dict[Tuple[str, str, int], Record] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.all)

    def __contains__(self, record: object) -> bool:
        if not isinstance(record, Record):
            return False
        return record.identity in self._records

    @property
    def all(self) -> List[Record]:
        """All records ordered by ascending id, rebuilt on every access."""
        return sorted(self._records.values(), key=lambda r: r.id)

    def new_record(self, name: str, email: str, age: int) -> Record:
        """Build a record carrying the next id from this store's counter."""
        return Record(id=self._counter.next_id(), name=name, email=email, age=age)

    def add_record(self, record: Record) -> bool:
        """
        Insert `record` unless one with the same name, email and age exists.

        Returns False when the record was dropped as a duplicate.
        """
        if record.identity in self._records:
            existing = self._records[record.identity]
            log.info(
                "Duplicate record dropped",
                extra={"record_id": record.id, "existing_id": existing.id},
            )
            return False
        self._records[record.identity] = record
        log.info("Record added", extra={"record_id": record.id})
        return True

    def query_by_key(self, key: Key, value: object) -> Set[Record]:
        """
        Return every record whose field named by `key` equals `value`.

        Raises
        ------
        TypeMismatchError
            If `value` is not a str for NAME/EMAIL or an int for AGE/ID.
        """
        if not key.accepts(value):
            log.warning(
                "Query value has the wrong type",
                extra={"key": key.name, "value_type": type(value).__name__},
            )
            raise TypeMismatchError(
                f"Key {key.name} expects {key.expected_type.__name__}, "
                f"got {type(value).__name__}",
                details={"key": key, "value": value},
            )
        return self._scan(key, value)

    def query(self, query: Query) -> Set[Record]:
        """Run a typed query; its value always matches its key."""
        return self._scan(query.key, query.value)

    def query_by_name(self, name: str) -> Set[Record]:
        return self.query(NameQuery(value=name))

    def query_by_email(self, email: str) -> Set[Record]:
        return self.query(EmailQuery(value=email))

    def query_by_age(self, age: int) -> Set[Record]:
        return self.query(AgeQuery(value=age))

    def query_by_id(self, record_id: int) -> Set[Record]:
        return self.query(IdQuery(value=record_id))

    def _scan(self, key: Key, value: object) -> Set[Record]:
        return {r for r in self._records.values() if getattr(r, key.field) == value}


__all__ = ["IdCounter", "RecordStore"]
