"""Application ports (interfaces). Implemented by infrastructure adapters."""

from enum import Enum
from typing import Any, Protocol, TypeVar

from agenda.application.dto import RecordKey

T = TypeVar("T")


class KeyMode(str, Enum):
    SEQUENTIAL = "id"
    CALLER = "caller"


class KeyValueStore(Protocol):
    """Keyed record substrate for one entity kind, plus its identifier counter."""

    def get(self, key: RecordKey) -> dict[str, Any] | None:
        """Return the stored record, or None."""
        ...

    def insert(self, key: RecordKey, record: dict[str, Any]) -> None:
        """Store record under key, replacing any previous value in place."""
        ...

    def insert_next(self, record: dict[str, Any], *, limit: int) -> int | None:
        """Store record under the counter value and advance the counter, as one write.

        Returns the key used, or None (nothing written) when the counter has reached limit.
        """
        ...

    def replace(self, key: RecordKey, record: dict[str, Any]) -> bool:
        """Overwrite an existing record. Returns False, writing nothing, if key is absent."""
        ...

    def remove(self, key: RecordKey) -> bool:
        """Remove key. Returns True if it was present."""
        ...

    def contains(self, key: RecordKey) -> bool:
        ...

    def keys(self) -> list[RecordKey]:
        """Return live keys in the order they were first inserted."""
        ...

    def load_counter(self) -> int:
        """Return the next identifier to issue (0 for a fresh store)."""
        ...

    def save_counter(self, value: int) -> None:
        ...


class RecordRepository(Protocol[T]):
    """Identifier allocation and keyed storage for one entity kind."""

    @property
    def key_mode(self) -> KeyMode:
        ...

    def create(self, entity: T, *, caller: str | None = None) -> RecordKey:
        """Store entity and return its key."""
        ...

    def read(self, key: RecordKey) -> T | None:
        ...

    def update(self, key: RecordKey, entity: T) -> bool:
        """Replace the record at key. Returns False (and stores nothing) if absent."""
        ...

    def delete(self, key: RecordKey) -> bool:
        """Remove the record at key. Returns True if it was present."""
        ...

    def entries(self) -> list[tuple[RecordKey, T]]:
        """Return (key, record) pairs ordered by key."""
        ...

    def list(self) -> list[T]:
        """Return surviving records, same order as entries()."""
        ...
