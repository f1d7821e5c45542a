"""Integration tests for Neo4jKeyValueStore. Require Docker
(testcontainers); skipped when it is not available."""

import pytest

from agenda.application import Created
from agenda.infrastructure import (
    AgendaSettings,
    Neo4jKeyValueStore,
    build_agenda,
    ensure_record_constraint,
)


@pytest.fixture(scope="session")
def neo4j_driver():
    neo4j_module = pytest.importorskip("testcontainers.neo4j")
    try:
        container = neo4j_module.Neo4jContainer().start()
    except Exception as e:
        pytest.skip(f"Neo4j container unavailable: {e}")
    driver = container.get_driver()
    try:
        ensure_record_constraint(driver)
        yield driver
    finally:
        driver.close()
        container.stop()


@pytest.fixture
def clean_neo4j(neo4j_driver):
    """Clear the graph before each test so tests are independent."""
    with neo4j_driver.session() as session:
        session.run("MATCH (n) DETACH DELETE n")
    yield neo4j_driver


def test_insert_get_remove(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    store.insert(0, {"name": "Ana", "age": 20})

    assert store.contains(0)
    assert store.get(0) == {"name": "Ana", "age": 20}
    assert store.get(1) is None

    assert store.remove(0) is True
    assert store.remove(0) is False
    assert not store.contains(0)


def test_keys_in_creation_order_and_replace_keeps_position(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    store.insert("zed", {"n": 1})
    store.insert("amy", {"n": 2})
    store.insert("zed", {"n": 3})
    assert store.keys() == ["zed", "amy"]
    assert store.get("zed") == {"n": 3}


def test_namespaces_are_independent(clean_neo4j):
    contacts = Neo4jKeyValueStore(clean_neo4j, "contacts")
    appointments = Neo4jKeyValueStore(clean_neo4j, "appointments")
    contacts.insert(0, {"name": "Ana"})
    contacts.save_counter(1)
    assert appointments.keys() == []
    assert appointments.load_counter() == 0
    assert contacts.load_counter() == 1


def test_agenda_counter_survives_new_service(clean_neo4j):
    settings = AgendaSettings(store="neo4j")
    service = build_agenda(settings, driver=clean_neo4j)
    assert service.create_contact("Ana", "555", 20, "01/01/2000") == Created(record_id=0)
    assert service.create_contact("Bob", "556", 21, "02/01/2000") == Created(record_id=1)
    assert service.delete_contact(1) is True

    reopened = build_agenda(settings, driver=clean_neo4j)
    assert reopened.create_contact("Cid", "557", 22, "03/01/2000") == Created(record_id=2)
    assert [c.name for c in reopened.list_contacts()] == ["Ana", "Cid"]


def test_insert_next_allocates_and_bumps_counter_together(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    assert store.insert_next({"name": "Ana"}, limit=10) == 0
    assert store.insert_next({"name": "Bob"}, limit=10) == 1
    assert store.load_counter() == 2
    assert store.keys() == [0, 1]
    assert store.get(1) == {"name": "Bob"}


def test_insert_next_writes_nothing_at_limit(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    store.save_counter(3)
    assert store.insert_next({"name": "Ana"}, limit=3) is None
    assert store.keys() == []
    assert store.load_counter() == 3


def test_positions_come_from_counter_node(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    store.insert_next({"n": 0}, limit=10)
    store.insert("caller", {"n": 1})
    store.insert_next({"n": 2}, limit=10)
    assert store.keys() == [0, "caller", 1]


def test_replace_only_touches_existing_records(clean_neo4j):
    store = Neo4jKeyValueStore(clean_neo4j, "contacts")
    assert store.replace(0, {"name": "x"}) is False
    assert store.keys() == []
    store.insert_next({"name": "x"}, limit=10)
    assert store.replace(0, {"name": "y"}) is True
    assert store.get(0) == {"name": "y"}
