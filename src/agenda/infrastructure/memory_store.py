"""In-memory implementation of KeyValueStore (no DB)."""

from typing import Any

from agenda.application.dto import RecordKey


class InMemoryKeyValueStore:
    """Stores records in a dict. Order preserved by first insertion; replacing a value keeps its position."""

    def __init__(self) -> None:
        self._records: dict[RecordKey, dict[str, Any]] = {}
        self._counter = 0

    def get(self, key: RecordKey) -> dict[str, Any] | None:
        record = self._records.get(key)
        if record is None:
            return None
        return dict(record)

    def insert(self, key: RecordKey, record: dict[str, Any]) -> None:
        self._records[key] = dict(record)

    def insert_next(self, record: dict[str, Any], *, limit: int) -> int | None:
        # Counter moves first: a failed record write leaves a gap, never a reissued id.
        key = self.load_counter()
        if key >= limit:
            return None
        self.save_counter(key + 1)
        self.insert(key, record)
        return key

    def replace(self, key: RecordKey, record: dict[str, Any]) -> bool:
        if key not in self._records:
            return False
        self.insert(key, record)
        return True

    def remove(self, key: RecordKey) -> bool:
        return self._records.pop(key, None) is not None

    def contains(self, key: RecordKey) -> bool:
        return key in self._records

    def keys(self) -> list[RecordKey]:
        return list(self._records)

    def load_counter(self) -> int:
        return self._counter

    def save_counter(self, value: int) -> None:
        self._counter = value
