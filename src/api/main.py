"""
FastAPI backend: REST API for contacts and appointments.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse
from neo4j import GraphDatabase
from pydantic import BaseModel, Field

from agenda.application import (
    AgendaService,
    Created,
    KeyMode,
    NotFound,
    RecordKey,
    Updated,
)
from agenda.domain import Appointment, Category, Contact, Priority
from agenda.infrastructure import AgendaSettings, build_agenda, ensure_record_constraint
from agenda.infrastructure.settings import STORE_NEO4J

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

# Caller identity, used as the record key in caller-keyed mode.
USER_ID_HEADER = "X-User-Id"
DEFAULT_USER_ID = "default"


def _get_driver(settings: AgendaSettings):
    return GraphDatabase.driver(
        settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password)
    )


def get_service(app: FastAPI) -> AgendaService:
    service = getattr(app.state, "service", None)
    if service is None:
        settings = getattr(app.state, "settings", None) or AgendaSettings.from_env()
        driver = _get_cached_driver(app, settings) if settings.store == STORE_NEO4J else None
        service = build_agenda(settings, driver=driver)
        app.state.service = service
    return service


def _get_cached_driver(app: FastAPI, settings: AgendaSettings):
    if getattr(app.state, "driver", None) is None:
        app.state.driver = _get_driver(settings)
    return app.state.driver


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.driver = None
    app.state.service = None
    app.state.settings = AgendaSettings.from_env()
    logger.info(
        "Agenda API: store=%s, key mode=%s",
        app.state.settings.store,
        app.state.settings.key_mode.value,
    )
    try:
        if app.state.settings.store == STORE_NEO4J:
            app.state.driver = _get_driver(app.state.settings)
            ensure_record_constraint(app.state.driver)
        yield
    finally:
        if getattr(app.state, "driver", None) is not None:
            app.state.driver.close()


app = FastAPI(title="Agenda API", lifespan=lifespan)


def _caller(x_user_id: str | None) -> str:
    return (x_user_id or "").strip() or DEFAULT_USER_ID


def _parse_key(record_id: str, service: AgendaService) -> RecordKey:
    """Path ids are ints for sequential agendas; caller-keyed agendas use the raw string."""
    if service.key_mode is KeyMode.SEQUENTIAL and record_id.isascii() and record_id.isdigit():
        return int(record_id)
    return record_id


def _raise_for_failure(result) -> None:
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=result.reason)
    if not isinstance(result, (Created, Updated)):
        raise HTTPException(status_code=400, detail=result.reason)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    name: str
    phone: str
    age: int = Field(ge=0)
    birthdate: str
    category: Category = Category.COLLEAGUE
    email: str = ""


class ContactItem(ContactBody):
    id: RecordKey


def _contact_item(record_id: RecordKey, contact: Contact) -> ContactItem:
    return ContactItem(id=record_id, **contact.to_record())


@app.post("/contacts")
def create_contact(
    body: ContactBody,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    service = get_service(request.app)
    result = service.create_contact(
        body.name,
        body.phone,
        body.age,
        body.birthdate,
        body.category,
        email=body.email,
        caller=_caller(x_user_id),
    )
    _raise_for_failure(result)
    return JSONResponse(content={"id": result.record_id}, status_code=201)


@app.get("/contacts")
def list_contacts(request: Request):
    service = get_service(request.app)
    return [_contact_item(key, c) for key, c in service.list_contact_entries()]


@app.get("/contacts/{record_id}")
def read_contact(record_id: str, request: Request):
    service = get_service(request.app)
    key = _parse_key(record_id, service)
    contact = service.read_contact(key)
    if contact is None:
        raise HTTPException(status_code=404, detail=f"No contact with id {record_id!r}.")
    return _contact_item(key, contact)


@app.put("/contacts/{record_id}")
def update_contact(record_id: str, body: ContactBody, request: Request):
    service = get_service(request.app)
    result = service.update_contact(
        _parse_key(record_id, service),
        body.name,
        body.phone,
        body.age,
        body.birthdate,
        body.category,
        email=body.email,
    )
    _raise_for_failure(result)
    return {"id": result.record_id}


@app.delete("/contacts/{record_id}")
def delete_contact(record_id: str, request: Request):
    service = get_service(request.app)
    return {"deleted": service.delete_contact(_parse_key(record_id, service))}


# --- REST: appointments ---


class AppointmentBody(BaseModel):
    title: str
    date: str
    time: str
    priority: Priority = Priority.LOW
    duration: int = 0
    description: str = ""


class AppointmentItem(AppointmentBody):
    id: RecordKey


def _appointment_item(record_id: RecordKey, appointment: Appointment) -> AppointmentItem:
    return AppointmentItem(id=record_id, **appointment.to_record())


@app.post("/appointments")
def create_appointment(
    body: AppointmentBody,
    request: Request,
    x_user_id: str | None = Header(None, alias=USER_ID_HEADER),
):
    service = get_service(request.app)
    result = service.create_appointment(
        body.title,
        body.date,
        body.time,
        body.priority,
        body.duration,
        description=body.description,
        caller=_caller(x_user_id),
    )
    _raise_for_failure(result)
    return JSONResponse(content={"id": result.record_id}, status_code=201)


@app.get("/appointments")
def list_appointments(request: Request):
    service = get_service(request.app)
    return [_appointment_item(key, a) for key, a in service.list_appointment_entries()]


@app.get("/appointments/{record_id}")
def read_appointment(record_id: str, request: Request):
    service = get_service(request.app)
    key = _parse_key(record_id, service)
    appointment = service.read_appointment(key)
    if appointment is None:
        raise HTTPException(status_code=404, detail=f"No appointment with id {record_id!r}.")
    return _appointment_item(key, appointment)


@app.put("/appointments/{record_id}")
def update_appointment(record_id: str, body: AppointmentBody, request: Request):
    service = get_service(request.app)
    result = service.update_appointment(
        _parse_key(record_id, service),
        body.title,
        body.date,
        body.time,
        body.priority,
        body.duration,
        description=body.description,
    )
    _raise_for_failure(result)
    return {"id": result.record_id}


@app.delete("/appointments/{record_id}")
def delete_appointment(record_id: str, request: Request):
    service = get_service(request.app)
    return {"deleted": service.delete_appointment(_parse_key(record_id, service))}
