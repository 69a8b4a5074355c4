"""
Add-record screen: asks for name, email and age, in that order.

Name and email are taken verbatim. Age must parse as a non-negative integer;
anything else re-prompts for the age without losing the earlier answers.
"""

from __future__ import annotations

from typing import Optional

from record_tracker.activities.abstract import AbstractActivity, parse_int
from record_tracker.console import Console
from record_tracker.domain.models import Record, RecordDraft
from record_tracker.store import RecordStore

STEP_NAME = 0
STEP_EMAIL = 1
STEP_AGE = 2

_PROMPTS = {
    STEP_NAME: "Enter the name: ",
    STEP_EMAIL: "Enter the email address: ",
    STEP_AGE: "Enter the age: ",
}


class AddRecordActivity(AbstractActivity):
    def __init__(self, console: Console, store: RecordStore) -> None:
        super().__init__(console)
        self.store = store
        self.step = STEP_NAME
        self.draft = RecordDraft()
        self.record: Optional[Record] = None

    @property
    def prompt(self) -> str:
        return _PROMPTS.get(self.step, "Uh oh, I'm lost!")

    def handle_input(self, line: str) -> bool:
        if self.step == STEP_NAME:
            self.draft.name = line
        elif self.step == STEP_EMAIL:
            self.draft.email = line
        elif self.step == STEP_AGE:
            age = _parse_age(line)
            if age is None:
                self.console.write("Invalid age. Try again.")
                return False
            self.draft.age = age
            return True
        else:
            return True

        self.step += 1
        return False

    def on_finish(self) -> None:
        self.record = self.store.new_record(self.draft.name, self.draft.email, self.draft.age)
        self.console.write(f"Added record #{self.record.id}")
        self.store.add_record(self.record)


def _parse_age(text: str) -> Optional[int]:
    age = parse_int(text)
    if age is None or age < 0:
        return None
    return age


__all__ = ["AddRecordActivity"]
