"""Contact and appointment CRUD. Fields are validated before any storage call."""

import logging

from agenda.application.dto import (
    Created,
    EmptyField,
    InvalidDateFormat,
    InvalidTimeFormat,
    NotFound,
    RecordKey,
    Updated,
    ValidationFailure,
)
from agenda.application.ports import KeyMode, RecordRepository
from agenda.domain import (
    Appointment,
    Category,
    Contact,
    Priority,
    validate_date,
    validate_time,
)

logger = logging.getLogger(__name__)


class AgendaService:
    """Facade over one contact repository and one appointment repository.

    validate=False gives the unvalidated agenda: any text is stored as given.
    strict_numbers=False makes date/time checks read unparsable numbers as 0.
    """

    def __init__(
        self,
        contacts: RecordRepository[Contact],
        appointments: RecordRepository[Appointment],
        *,
        validate: bool = True,
        strict_numbers: bool = True,
    ) -> None:
        self._contacts = contacts
        self._appointments = appointments
        self._validate = validate
        self._strict = strict_numbers

    @property
    def key_mode(self) -> KeyMode:
        """How records are keyed: sequential ids or caller identities."""
        return self._contacts.key_mode

    # --- validation ---

    def _check_contact(self, contact: Contact) -> ValidationFailure | None:
        if not self._validate:
            return None
        if contact.name == "":
            return EmptyField(field="name")
        if contact.phone == "":
            return EmptyField(field="phone")
        if not validate_date(contact.birthdate, strict=self._strict):
            return InvalidDateFormat(field="birthdate", value=contact.birthdate)
        return None

    def _check_appointment(self, appointment: Appointment) -> ValidationFailure | None:
        if not self._validate:
            return None
        if appointment.title == "":
            return EmptyField(field="title")
        if not validate_date(appointment.date, strict=self._strict):
            return InvalidDateFormat(field="date", value=appointment.date)
        if not validate_time(appointment.time, strict=self._strict):
            return InvalidTimeFormat(field="time", value=appointment.time)
        return None

    # --- contacts ---

    def create_contact(
        self,
        name: str,
        phone: str,
        age: int,
        birthdate: str,
        category: Category | str = Category.COLLEAGUE,
        *,
        email: str = "",
        caller: str | None = None,
    ) -> Created | ValidationFailure:
        """Validate and store a new contact. Returns its id, or the first failing field."""
        contact = Contact(
            name=name,
            phone=phone,
            age=age,
            birthdate=birthdate,
            category=category,
            email=email,
        )
        failure = self._check_contact(contact)
        if failure is not None:
            logger.debug("Rejected contact: %s", failure.reason)
            return failure
        record_id = self._contacts.create(contact, caller=caller)
        logger.info("Created contact %s", record_id)
        return Created(record_id=record_id)

    def read_contact(self, record_id: RecordKey) -> Contact | None:
        return self._contacts.read(record_id)

    def update_contact(
        self,
        record_id: RecordKey,
        name: str,
        phone: str,
        age: int,
        birthdate: str,
        category: Category | str = Category.COLLEAGUE,
        *,
        email: str = "",
    ) -> Updated | NotFound | ValidationFailure:
        """Replace every field of an existing contact."""
        contact = Contact(
            name=name,
            phone=phone,
            age=age,
            birthdate=birthdate,
            category=category,
            email=email,
        )
        failure = self._check_contact(contact)
        if failure is not None:
            logger.debug("Rejected update of contact %s: %s", record_id, failure.reason)
            return failure
        if not self._contacts.update(record_id, contact):
            return NotFound(record_id=record_id)
        logger.info("Updated contact %s", record_id)
        return Updated(record_id=record_id)

    def delete_contact(self, record_id: RecordKey) -> bool:
        deleted = self._contacts.delete(record_id)
        if deleted:
            logger.info("Deleted contact %s", record_id)
        return deleted

    def list_contacts(self) -> list[Contact]:
        """Return all contacts by ascending id."""
        return self._contacts.list()

    def list_contact_entries(self) -> list[tuple[RecordKey, Contact]]:
        return self._contacts.entries()

    # --- appointments ---

    def create_appointment(
        self,
        title: str,
        date: str,
        time: str,
        priority: Priority | str = Priority.LOW,
        duration: int = 0,
        *,
        description: str = "",
        caller: str | None = None,
    ) -> Created | ValidationFailure:
        """Validate and store a new appointment. Returns its id, or the first failing field."""
        appointment = Appointment(
            title=title,
            date=date,
            time=time,
            priority=priority,
            duration=duration,
            description=description,
        )
        failure = self._check_appointment(appointment)
        if failure is not None:
            logger.debug("Rejected appointment: %s", failure.reason)
            return failure
        record_id = self._appointments.create(appointment, caller=caller)
        logger.info("Created appointment %s", record_id)
        return Created(record_id=record_id)

    def read_appointment(self, record_id: RecordKey) -> Appointment | None:
        return self._appointments.read(record_id)

    def update_appointment(
        self,
        record_id: RecordKey,
        title: str,
        date: str,
        time: str,
        priority: Priority | str = Priority.LOW,
        duration: int = 0,
        *,
        description: str = "",
    ) -> Updated | NotFound | ValidationFailure:
        """Replace every field of an existing appointment."""
        appointment = Appointment(
            title=title,
            date=date,
            time=time,
            priority=priority,
            duration=duration,
            description=description,
        )
        failure = self._check_appointment(appointment)
        if failure is not None:
            logger.debug("Rejected update of appointment %s: %s", record_id, failure.reason)
            return failure
        if not self._appointments.update(record_id, appointment):
            return NotFound(record_id=record_id)
        logger.info("Updated appointment %s", record_id)
        return Updated(record_id=record_id)

    def delete_appointment(self, record_id: RecordKey) -> bool:
        deleted = self._appointments.delete(record_id)
        if deleted:
            logger.info("Deleted appointment %s", record_id)
        return deleted

    def list_appointments(self) -> list[Appointment]:
        """Return all appointments by ascending id."""
        return self._appointments.list()

    def list_appointment_entries(self) -> list[tuple[RecordKey, Appointment]]:
        return self._appointments.entries()
