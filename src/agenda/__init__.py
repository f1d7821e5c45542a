"""
Agenda core: clean-architecture layout.

- domain: entities (Contact, Appointment), date/time validation. No outer dependencies.
- application: use cases (AgendaService), ports (KeyValueStore, RecordRepository), result types.
- infrastructure: adapters (InMemoryKeyValueStore, Neo4jKeyValueStore, KeyedRepository).
"""

from agenda.application import (
    AgendaService,
    Created,
    EmptyField,
    InvalidDateFormat,
    InvalidTimeFormat,
    KeyValueStore,
    NotFound,
    RecordRepository,
    Updated,
)
from agenda.domain import (
    Appointment,
    Category,
    Contact,
    CounterOverflowError,
    MissingCallerError,
    Priority,
    validate_date,
    validate_time,
)
from agenda.infrastructure import (
    AgendaSettings,
    InMemoryKeyValueStore,
    KeyedRepository,
    KeyMode,
    Neo4jKeyValueStore,
    build_agenda,
)

__all__ = [
    "AgendaService",
    "AgendaSettings",
    "Appointment",
    "Category",
    "Contact",
    "CounterOverflowError",
    "Created",
    "EmptyField",
    "InMemoryKeyValueStore",
    "InvalidDateFormat",
    "InvalidTimeFormat",
    "KeyMode",
    "KeyValueStore",
    "KeyedRepository",
    "MissingCallerError",
    "Neo4jKeyValueStore",
    "NotFound",
    "Priority",
    "RecordRepository",
    "Updated",
    "build_agenda",
    "validate_date",
    "validate_time",
]
