"""Result types returned by AgendaService create and update operations."""

from dataclasses import dataclass

RecordKey = int | str


# --- success ---


@dataclass(frozen=True)
class Created:
    """Record was stored under record_id."""

    record_id: RecordKey


@dataclass(frozen=True)
class Updated:
    """All fields of the record at record_id were replaced."""

    record_id: RecordKey


# --- validation failures (nothing was stored) ---


@dataclass(frozen=True)
class EmptyField:
    """A required text field (name, phone, title) was empty."""

    field: str

    @property
    def reason(self) -> str:
        return f"{self.field} is required."


@dataclass(frozen=True)
class InvalidDateFormat:
    """Date did not satisfy the dd/mm/yyyy rule."""

    field: str
    value: str

    @property
    def reason(self) -> str:
        return f"{self.field} must be a valid dd/mm/yyyy date, got {self.value!r}."


@dataclass(frozen=True)
class InvalidTimeFormat:
    """Time did not satisfy the hh:mm rule."""

    field: str
    value: str

    @property
    def reason(self) -> str:
        return f"{self.field} must be a valid hh:mm time, got {self.value!r}."


ValidationFailure = EmptyField | InvalidDateFormat | InvalidTimeFormat


# --- update target missing ---


@dataclass(frozen=True)
class NotFound:
    """No record for the given id."""

    record_id: RecordKey

    @property
    def reason(self) -> str:
        return f"No record with id {self.record_id!r}."
