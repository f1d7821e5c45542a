"""Wire stores, repositories and AgendaService from AgendaSettings."""

import logging

from agenda.application import AgendaService
from agenda.domain import Appointment, Contact
from agenda.infrastructure.memory_store import InMemoryKeyValueStore
from agenda.infrastructure.persistence.neo4j_store import Neo4jKeyValueStore
from agenda.infrastructure.repository import KeyedRepository
from agenda.infrastructure.settings import STORE_NEO4J, AgendaSettings

logger = logging.getLogger(__name__)

CONTACTS_NAMESPACE = "contacts"
APPOINTMENTS_NAMESPACE = "appointments"


def build_agenda(settings: AgendaSettings | None = None, *, driver=None) -> AgendaService:
    """Return an AgendaService for settings. A Neo4j driver is required when settings.store is neo4j."""
    settings = settings or AgendaSettings()
    if settings.store == STORE_NEO4J:
        if driver is None:
            raise ValueError("A Neo4j driver is required for the neo4j store.")
        contact_store = Neo4jKeyValueStore(driver, CONTACTS_NAMESPACE)
        appointment_store = Neo4jKeyValueStore(driver, APPOINTMENTS_NAMESPACE)
    else:
        contact_store = InMemoryKeyValueStore()
        appointment_store = InMemoryKeyValueStore()
    logger.info(
        "Agenda: store=%s key_mode=%s validate=%s strict_numbers=%s",
        settings.store,
        settings.key_mode.value,
        settings.validate,
        settings.strict_numbers,
    )
    return AgendaService(
        KeyedRepository(Contact, contact_store, key_mode=settings.key_mode),
        KeyedRepository(Appointment, appointment_store, key_mode=settings.key_mode),
        validate=settings.validate,
        strict_numbers=settings.strict_numbers,
    )
