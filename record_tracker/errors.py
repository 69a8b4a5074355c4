"""Domain errors for the Record Tracker."""

from __future__ import annotations

from typing import Any, Dict


class RecordTrackerError(Exception):
    """Base exception for Record Tracker errors."""

    def __init__(self, message: str, *, details: Dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class IllegalStateError(RecordTrackerError):
    """An activity manager was started while it already had a run in progress."""


class TypeMismatchError(RecordTrackerError):
    """A query value does not have the kind its key expects."""


class InputExhaustedError(RecordTrackerError):
    """The console kept reporting end-of-input past the configured limit."""


__all__ = [
    "RecordTrackerError",
    "IllegalStateError",
    "TypeMismatchError",
    "InputExhaustedError",
]
