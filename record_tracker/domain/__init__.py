"""
Domain package for the Record Tracker.

Exports the record schema, query keys and typed query values used by the
store and the activities. Keep this package focused on data definitions and
validation concerns.
"""

from record_tracker.domain.models import (
    AgeQuery,
    EmailQuery,
    IdQuery,
    Key,
    NameQuery,
    Query,
    Record,
    RecordDraft,
)

__all__ = [
    "AgeQuery",
    "EmailQuery",
    "IdQuery",
    "Key",
    "NameQuery",
    "Query",
    "Record",
    "RecordDraft",
]
