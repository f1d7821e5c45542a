"""Infrastructure layer: concrete implementations of application ports."""

from agenda.infrastructure.factory import build_agenda
from agenda.infrastructure.memory_store import InMemoryKeyValueStore
from agenda.infrastructure.persistence.neo4j_store import (
    Neo4jKeyValueStore,
    ensure_record_constraint,
)
from agenda.infrastructure.repository import KeyedRepository, KeyMode
from agenda.infrastructure.settings import AgendaSettings

__all__ = [
    "AgendaSettings",
    "InMemoryKeyValueStore",
    "KeyMode",
    "KeyedRepository",
    "Neo4jKeyValueStore",
    "build_agenda",
    "ensure_record_constraint",
]
