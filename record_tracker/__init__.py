"""
Record Tracker - a console tool for keeping personal records in memory.

The package is organised around a small activity-stack interpreter:

- An in-memory record store with typed-key lookup
- Console screens ("activities") for the menu, adding and querying records
- An activity manager that drives the current screen's prompt/input loop

Records live only for the duration of a session.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_tracker.activities import (
    AbstractActivity,
    Activity,
    AddRecordActivity,
    MenuActivity,
    MenuOption,
    QueryRecordsActivity,
)
from record_tracker.app import build_root_menu, run_tracker
from record_tracker.config import Settings, get_settings
from record_tracker.console import Console
from record_tracker.domain.models import Key, Record
from record_tracker.errors import (
    IllegalStateError,
    InputExhaustedError,
    RecordTrackerError,
    TypeMismatchError,
)
from record_tracker.manager import ActivityManager
from record_tracker.store import IdCounter, RecordStore
from record_tracker.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Key",
    "Record",
    "IdCounter",
    "RecordStore",
    # Activities
    "AbstractActivity",
    "Activity",
    "AddRecordActivity",
    "MenuActivity",
    "MenuOption",
    "QueryRecordsActivity",
    "ActivityManager",
    "Console",
    # Wiring
    "build_root_menu",
    "run_tracker",
    # Errors
    "RecordTrackerError",
    "IllegalStateError",
    "TypeMismatchError",
    "InputExhaustedError",
    # Logging
    "configure_logging",
    "get_logger",
]
