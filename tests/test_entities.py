"""Tests for Contact and Appointment entities."""

import pytest

from agenda.domain import Appointment, Category, Contact, Priority


def test_contact_rejects_negative_age():
    with pytest.raises(ValueError):
        Contact(name="Ana", phone="555", age=-1, birthdate="01/01/2000")


def test_enum_fields_coerced_from_strings():
    assert Contact(category="Friend").category is Category.FRIEND
    assert Appointment(priority="High").priority is Priority.HIGH


def test_unknown_enum_value_rejected():
    with pytest.raises(ValueError):
        Contact(category="Enemy")
    with pytest.raises(ValueError):
        Appointment(priority="Urgent")


def test_record_conversion_uses_plain_values():
    contact = Contact(name="Ana", phone="555", age=20, birthdate="01/01/2000", category=Category.FAMILY)
    record = contact.to_record()
    assert record == {
        "name": "Ana",
        "phone": "555",
        "age": 20,
        "birthdate": "01/01/2000",
        "category": "Family",
        "email": "",
    }
    assert type(record["category"]) is str
    assert Contact.from_record(record) == contact

    appointment = Appointment(title="T", date="01/01/2025", time="08:00", duration=-10)
    assert Appointment.from_record(appointment.to_record()) == appointment
    assert appointment.to_record()["priority"] == "Low"
