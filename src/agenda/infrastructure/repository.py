"""KeyedRepository: identifier allocation and keyed storage for one entity kind.

Two key modes:

- SEQUENTIAL: ids 0, 1, 2, ... from a per-kind counter kept in the store.
  Ids are never reused; deleting a record leaves a permanent gap.
- CALLER: the caller identity is the key. Each caller has one slot and a
  second create overwrites the first.
"""

import logging
import threading
from typing import Any, Generic, Protocol, TypeVar

from agenda.application.dto import RecordKey
from agenda.application.ports import KeyMode, KeyValueStore
from agenda.domain import MAX_ID, CounterOverflowError, MissingCallerError

logger = logging.getLogger(__name__)


class RecordEntity(Protocol):
    def to_record(self) -> dict[str, Any]: ...


E = TypeVar("E", bound=RecordEntity)


class KeyedRepository(Generic[E]):
    """Owns one entity kind's records and counter. Mutations are serialized by a lock."""

    def __init__(
        self,
        entity_type: type[E],
        store: KeyValueStore,
        *,
        key_mode: KeyMode = KeyMode.SEQUENTIAL,
    ) -> None:
        self._entity_type = entity_type
        self._store = store
        self._key_mode = KeyMode(key_mode)
        self._lock = threading.Lock()

    @property
    def key_mode(self) -> KeyMode:
        return self._key_mode

    @property
    def kind(self) -> str:
        return self._entity_type.__name__

    def create(self, entity: E, *, caller: str | None = None) -> RecordKey:
        with self._lock:
            if self._key_mode is KeyMode.CALLER:
                key = (caller or "").strip()
                if not key:
                    raise MissingCallerError(f"Caller identity is required to create a {self.kind}.")
                self._store.insert(key, entity.to_record())
            else:
                key = self._store.insert_next(entity.to_record(), limit=MAX_ID)
                if key is None:
                    logger.error("%s id counter exhausted at %d", self.kind, MAX_ID)
                    raise CounterOverflowError(f"{self.kind} identifiers exhausted.")
        logger.debug("Stored %s under %r", self.kind, key)
        return key

    def read(self, key: RecordKey) -> E | None:
        record = self._store.get(key)
        if record is None:
            return None
        return self._entity_type.from_record(record)

    def update(self, key: RecordKey, entity: E) -> bool:
        with self._lock:
            if not self._store.replace(key, entity.to_record()):
                return False
        logger.debug("Replaced %s %r", self.kind, key)
        return True

    def delete(self, key: RecordKey) -> bool:
        with self._lock:
            removed = self._store.remove(key)
        if removed:
            logger.debug("Removed %s %r", self.kind, key)
        return removed

    def entries(self) -> list[tuple[RecordKey, E]]:
        keys = self._store.keys()
        if self._key_mode is KeyMode.SEQUENTIAL:
            keys = sorted(keys)
        out = []
        for key in keys:
            record = self._store.get(key)
            if record is not None:
                out.append((key, self._entity_type.from_record(record)))
        return out

    def list(self) -> list[E]:
        return [entity for _, entity in self.entries()]
