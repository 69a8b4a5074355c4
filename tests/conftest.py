"""
Pytest configuration for the Record Tracker.

Provides fixtures for:
- A console backed by in-memory text streams
- An empty record store and a store seeded with two people
- Settings isolated from the developer's environment
"""

from __future__ import annotations

import io
from typing import Callable, Generator

import pytest

from record_tracker.config import Settings, get_settings
from record_tracker.console import Console
from record_tracker.store import RecordStore


class ScriptedConsole(Console):
    """Console fed from a fixed list of input lines, capturing all output."""

    def __init__(self, lines: list[str] | None = None) -> None:
        text = "".join(f"{line}\n" for line in (lines or []))
        super().__init__(stdin=io.StringIO(text), stdout=io.StringIO())

    @property
    def output(self) -> str:
        return self.stdout.getvalue()  # type: ignore[attr-defined]

    @property
    def output_lines(self) -> list[str]:
        return self.output.splitlines()


@pytest.fixture
def make_console() -> Callable[..., ScriptedConsole]:
    """
    Factory for scripted consoles: `make_console(["1", "Alice", ...])`.
    """
    return lambda lines=None: ScriptedConsole(lines)


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture
def store() -> RecordStore:
    return RecordStore()


@pytest.fixture
def seeded_store() -> RecordStore:
    """
    Store holding Alice (#0, age 30) and Bob (#1, age 25).
    """
    store = RecordStore()
    store.add_record(store.new_record("Alice", "alice@example.com", 30))
    store.add_record(store.new_record("Bob", "bob@example.com", 25))
    return store


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with explicit values so local `.env` files or env vars do not leak in.
    """
    return Settings(
        app_env="test",
        log_level="DEBUG",
        log_json=False,
        tracker_title="Record Tracker v1.0",
        tracker_prompt="> ",
        tracker_max_empty_reads=3,
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
