"""Neo4j implementation of KeyValueStore.
Graph: one (:AgendaRecord {namespace, key, position, payload}) node per record and one
(:AgendaCounter {namespace, next_id, next_position}) node per namespace. payload is the record as JSON.
position is taken from the counter node on first insert so keys() can return creation order.
Writes that touch the counter first take its write lock (SET then REMOVE of _lock), so
concurrent writers on one database serialize on it.
"""

import json
from typing import Any

from agenda.application.dto import RecordKey

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT agenda_record_unique IF NOT EXISTS
    FOR (r:AgendaRecord) REQUIRE (r.namespace, r.key) IS NODE UNIQUE
    """,
    """
    CREATE CONSTRAINT agenda_counter_unique IF NOT EXISTS
    FOR (c:AgendaCounter) REQUIRE c.namespace IS UNIQUE
    """,
)

_LOCK_COUNTER = """
MERGE (c:AgendaCounter {namespace: $namespace})
SET c._lock = true
REMOVE c._lock
WITH c
"""

_GET_QUERY = """
MATCH (r:AgendaRecord {namespace: $namespace, key: $key})
RETURN r.payload AS payload
"""

_INSERT_QUERY = _LOCK_COUNTER + """
MERGE (r:AgendaRecord {namespace: $namespace, key: $key})
ON CREATE SET r.position = coalesce(c.next_position, 0),
    c.next_position = coalesce(c.next_position, 0) + 1
SET r.payload = $payload
"""

_INSERT_NEXT_QUERY = _LOCK_COUNTER + """
WITH c, coalesce(c.next_id, 0) AS next_id, coalesce(c.next_position, 0) AS next_position
WHERE next_id < $limit
CREATE (:AgendaRecord {
    namespace: $namespace,
    key: next_id,
    position: next_position,
    payload: $payload
})
SET c.next_id = next_id + 1, c.next_position = next_position + 1
RETURN next_id AS key
"""

_REPLACE_QUERY = """
MATCH (r:AgendaRecord {namespace: $namespace, key: $key})
SET r.payload = $payload
RETURN count(r) AS replaced
"""

_REMOVE_QUERY = """
MATCH (r:AgendaRecord {namespace: $namespace, key: $key})
DELETE r
RETURN count(*) AS removed
"""

_CONTAINS_QUERY = """
MATCH (r:AgendaRecord {namespace: $namespace, key: $key})
RETURN 1 AS ok
LIMIT 1
"""

_KEYS_QUERY = """
MATCH (r:AgendaRecord {namespace: $namespace})
RETURN r.key AS key
ORDER BY r.position
"""

_LOAD_COUNTER_QUERY = """
MATCH (c:AgendaCounter {namespace: $namespace})
RETURN c.next_id AS next_id
"""

_SAVE_COUNTER_QUERY = """
MERGE (c:AgendaCounter {namespace: $namespace})
SET c.next_id = $value
"""


def ensure_record_constraint(driver) -> None:
    """Create unique constraints on AgendaRecord(namespace, key) and AgendaCounter(namespace) if missing."""
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query)


class Neo4jKeyValueStore:
    """Stores one entity kind's records in Neo4j, scoped by namespace (e.g. "contacts")."""

    def __init__(self, driver: object, namespace: str) -> None:
        self._driver = driver
        self._namespace = namespace

    def get(self, key: RecordKey) -> dict[str, Any] | None:
        with self._driver.session() as session:
            record = session.run(_GET_QUERY, namespace=self._namespace, key=key).single()
        if not record:
            return None
        return json.loads(record["payload"])

    def insert(self, key: RecordKey, record: dict[str, Any]) -> None:
        with self._driver.session() as session:
            session.run(
                _INSERT_QUERY,
                namespace=self._namespace,
                key=key,
                payload=json.dumps(record),
            )

    def insert_next(self, record: dict[str, Any], *, limit: int) -> int | None:
        with self._driver.session() as session:
            result = session.run(
                _INSERT_NEXT_QUERY,
                namespace=self._namespace,
                limit=limit,
                payload=json.dumps(record),
            ).single()
        if not result:
            return None
        return int(result["key"])

    def replace(self, key: RecordKey, record: dict[str, Any]) -> bool:
        with self._driver.session() as session:
            result = session.run(
                _REPLACE_QUERY,
                namespace=self._namespace,
                key=key,
                payload=json.dumps(record),
            ).single()
        return bool(result and result["replaced"])

    def remove(self, key: RecordKey) -> bool:
        with self._driver.session() as session:
            record = session.run(_REMOVE_QUERY, namespace=self._namespace, key=key).single()
        return bool(record and record["removed"])

    def contains(self, key: RecordKey) -> bool:
        with self._driver.session() as session:
            record = session.run(_CONTAINS_QUERY, namespace=self._namespace, key=key).single()
        return record is not None

    def keys(self) -> list[RecordKey]:
        with self._driver.session() as session:
            result = session.run(_KEYS_QUERY, namespace=self._namespace)
            return [rec["key"] for rec in result]

    def load_counter(self) -> int:
        with self._driver.session() as session:
            record = session.run(_LOAD_COUNTER_QUERY, namespace=self._namespace).single()
        if not record or record["next_id"] is None:
            return 0
        return int(record["next_id"])

    def save_counter(self, value: int) -> None:
        with self._driver.session() as session:
            session.run(_SAVE_COUNTER_QUERY, namespace=self._namespace, value=value)
