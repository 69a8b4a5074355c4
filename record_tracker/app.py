"""
Wiring for an interactive Record Tracker session.

Builds the record store, the activity manager and the root menu, then runs
the manager until the user picks "Exit".
"""

from __future__ import annotations

from typing import Optional

from record_tracker.activities.add_record import AddRecordActivity
from record_tracker.activities.menu import MenuActivity
from record_tracker.activities.query_records import QueryRecordsActivity
from record_tracker.config import Settings, get_settings
from record_tracker.console import Console
from record_tracker.manager import ActivityManager
from record_tracker.store import RecordStore


def build_root_menu(
    store: RecordStore,
    manager: ActivityManager,
    console: Console,
    title: str,
    prompt: str = "> ",
) -> MenuActivity:
    """Root menu: add, list, query and exit."""
    menu = MenuActivity(console, title=title, prompt=prompt)

    def add_record() -> bool:
        manager.push(AddRecordActivity(console, store))
        return False

    def list_records() -> bool:
        for record in store.all:
            console.write(record.format())
        return False

    def query_records() -> bool:
        manager.push(QueryRecordsActivity(console, store))
        return False

    menu.add_option("Add Record", add_record)
    menu.add_option("List Records", list_records)
    menu.add_option("Query Records", query_records)
    menu.add_option("Exit", lambda: True)
    return menu


def run_tracker(
    console: Optional[Console] = None,
    store: Optional[RecordStore] = None,
    settings: Optional[Settings] = None,
    title: Optional[str] = None,
) -> RecordStore:
    """
    Run a full session and return the store it filled.

    Parameters
    ----------
    console : Console | None
        Defaults to a console over stdin/stdout.
    store : RecordStore | None
        Defaults to a fresh, empty store.
    settings : Settings | None
        Defaults to `get_settings()`.
    title : str | None
        Overrides the configured menu title.
    """
    settings = settings or get_settings()
    console = console or Console()
    store = store if store is not None else RecordStore()

    manager = ActivityManager(console, max_empty_reads=settings.tracker_max_empty_reads)
    root = build_root_menu(
        store,
        manager,
        console,
        title=title if title is not None else settings.tracker_title,
        prompt=settings.tracker_prompt,
    )
    manager.start(root)
    return store


__all__ = ["build_root_menu", "run_tracker"]
