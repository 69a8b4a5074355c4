"""
Activities package for the Record Tracker.

Re-exports the activity contract and the concrete screens so downstream code
can import from `record_tracker.activities` directly.
"""

from record_tracker.activities.abstract import AbstractActivity, Activity
from record_tracker.activities.add_record import AddRecordActivity
from record_tracker.activities.menu import MenuActivity, MenuOption
from record_tracker.activities.query_records import QueryRecordsActivity

__all__ = [
    # Abstracts
    "AbstractActivity",
    "Activity",
    # Concrete screens
    "AddRecordActivity",
    "MenuActivity",
    "MenuOption",
    "QueryRecordsActivity",
]
