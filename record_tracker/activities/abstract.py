"""
Activity interfaces for the Record Tracker.

An activity is one console screen: it exposes a prompt, is told when it
becomes active and when it is about to be removed, and consumes input one
line at a time. Concrete screens (menu, add-record, query-records) satisfy
the `Activity` protocol; `AbstractActivity` is a convenience base with no-op
lifecycle hooks.
"""

from __future__ import annotations

import abc
from typing import Optional, Protocol, runtime_checkable

from record_tracker.console import Console


@runtime_checkable
class Activity(Protocol):
    """
    Contract every screen driven by the activity manager implements.

    Attributes
    ----------
    prompt : str
        Text written before each input read, without a trailing newline.
    """

    @property
    def prompt(self) -> str: ...

    def on_start(self) -> None:
        """Run once when the screen becomes active."""
        ...

    def handle_input(self, line: str) -> bool:
        """
        Consume one line of input.

        Returns
        -------
        bool
            True when the screen is done and should be removed.
        """
        ...

    def on_finish(self) -> None:
        """Run once when the screen is about to be removed."""
        ...


class AbstractActivity(abc.ABC):
    """
    Optional ABC helper for class-based activities.

    Subclasses implement `prompt` and `handle_input`; lifecycle hooks default
    to no-ops.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    @property
    @abc.abstractmethod
    def prompt(self) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    def on_start(self) -> None:
        pass

    @abc.abstractmethod
    def handle_input(self, line: str) -> bool:  # pragma: no cover - interface only
        """Consume one line; return True when finished."""
        raise NotImplementedError

    def on_finish(self) -> None:
        pass


def parse_int(text: str) -> Optional[int]:
    """
    Parse an optionally signed run of ASCII digits; None for anything else.

    Surrounding whitespace is ignored. Underscore separators and non-ASCII
    digits, which `int()` would accept, are rejected.
    """
    text = text.strip()
    digits = text[1:] if text.startswith(("+", "-")) else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


__all__ = ["Activity", "AbstractActivity", "parse_int"]
