"""Application layer: the agenda service, ports, and result types. Depends only on domain."""

from agenda.application.agenda_service import AgendaService
from agenda.application.dto import (
    Created,
    EmptyField,
    InvalidDateFormat,
    InvalidTimeFormat,
    NotFound,
    RecordKey,
    Updated,
    ValidationFailure,
)
from agenda.application.ports import KeyMode, KeyValueStore, RecordRepository

__all__ = [
    "AgendaService",
    "Created",
    "EmptyField",
    "InvalidDateFormat",
    "InvalidTimeFormat",
    "KeyMode",
    "KeyValueStore",
    "NotFound",
    "RecordKey",
    "RecordRepository",
    "Updated",
    "ValidationFailure",
]
