"""Domain layer: entities, field validation, and fatal errors. No dependencies on outer layers."""

from agenda.domain.entities import MAX_ID, Appointment, Category, Contact, Priority
from agenda.domain.errors import CounterOverflowError, MissingCallerError
from agenda.domain.validation import (
    days_in_month,
    is_leap_year,
    validate_date,
    validate_time,
)

__all__ = [
    "MAX_ID",
    "Appointment",
    "Category",
    "Contact",
    "CounterOverflowError",
    "MissingCallerError",
    "Priority",
    "days_in_month",
    "is_leap_year",
    "validate_date",
    "validate_time",
]
