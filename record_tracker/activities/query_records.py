"""
Query screen: pick a key, then a value, then print the matching records.

Age and id values are parsed here, before the store is consulted, so the
store only ever receives a typed query whose value matches its key.
"""

from __future__ import annotations

from typing import Iterable, Optional

from record_tracker.activities.abstract import AbstractActivity, parse_int
from record_tracker.console import Console
from record_tracker.domain.models import (
    AgeQuery,
    EmailQuery,
    IdQuery,
    Key,
    NameQuery,
    Query,
    Record,
)
from record_tracker.store import RecordStore

STEP_KEY = 0
STEP_VALUE = 1

_PROMPTS = {
    STEP_KEY: "Key to query by (name, email, age, ID): ",
    STEP_VALUE: "Enter value to find records matching: ",
}


class QueryRecordsActivity(AbstractActivity):
    def __init__(self, console: Console, store: RecordStore) -> None:
        super().__init__(console)
        self.store = store
        self.step = STEP_KEY
        self.key: Optional[Key] = None

    @property
    def prompt(self) -> str:
        return _PROMPTS.get(self.step, "Oh no")

    def handle_input(self, line: str) -> bool:
        if self.step == STEP_KEY:
            self.key = Key.from_string(line)
            if self.key is None:
                self.console.write(f"Invalid key '{line}'.")
            else:
                self.step = STEP_VALUE
            return False

        if self.step == STEP_VALUE and self.key is not None:
            query = self._build_query(self.key, line)
            if query is None:
                return False
            self._print_matches(self.store.query(query))

        return True

    def _build_query(self, key: Key, line: str) -> Optional[Query]:
        if key is Key.NAME:
            return NameQuery(value=line)
        if key is Key.EMAIL:
            return EmailQuery(value=line)

        number = parse_int(line)
        if number is None:
            label = "age" if key is Key.AGE else "ID"
            self.console.write(f"Invalid {label} {line}")
            return None
        return AgeQuery(value=number) if key is Key.AGE else IdQuery(value=number)

    def _print_matches(self, matches: Iterable[Record]) -> None:
        found = sorted(matches, key=lambda r: r.id)
        self.console.write()
        if not found:
            self.console.write("No records found.")
        else:
            self.console.write("Records Found")
            self.console.write("=============")
            for record in found:
                self.console.write(record.format())
        self.console.write()


__all__ = ["QueryRecordsActivity"]
