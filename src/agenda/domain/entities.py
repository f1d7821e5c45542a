"""Domain entities: Contact and Appointment, with their enumerations."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

# Identifiers are unsigned 32-bit values.
MAX_ID = 2**32 - 1


class Category(str, Enum):
    FRIEND = "Friend"
    FAMILY = "Family"
    COLLEAGUE = "Colleague"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class Contact:
    """
    A person in the agenda.
    Field rules (non-empty name/phone, birthdate format) are enforced by the
    service, so unvalidated agendas can still hold any text here.
    """

    name: str = ""
    phone: str = ""
    age: int = 0
    birthdate: str = ""
    category: Category = Category.COLLEAGUE
    email: str = ""

    def __post_init__(self):
        if self.age < 0:
            raise ValueError("Contact age must be non-negative.")
        object.__setattr__(self, "category", Category(self.category))

    def to_record(self) -> dict[str, Any]:
        record = asdict(self)
        record["category"] = self.category.value
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Contact":
        return cls(**record)


@dataclass(frozen=True)
class Appointment:
    """A dated, timed entry. Duration is free-form (signed, any range)."""

    title: str = ""
    date: str = ""
    time: str = ""
    priority: Priority = Priority.LOW
    duration: int = 0
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "priority", Priority(self.priority))

    def to_record(self) -> dict[str, Any]:
        record = asdict(self)
        record["priority"] = self.priority.value
        return record

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Appointment":
        return cls(**record)
