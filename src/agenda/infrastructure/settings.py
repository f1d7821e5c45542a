"""Agenda configuration from environment variables (optionally loaded from .env by the entry point)."""

import os
from dataclasses import dataclass

from agenda.infrastructure.repository import KeyMode

STORE_MEMORY = "memory"
STORE_NEO4J = "neo4j"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}.")


@dataclass(frozen=True)
class AgendaSettings:
    """Which store backs the agenda and which variant of the rules applies."""

    store: str = STORE_MEMORY
    key_mode: KeyMode = KeyMode.SEQUENTIAL
    validate: bool = True
    strict_numbers: bool = True
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"

    def __post_init__(self):
        store = (self.store or "").strip().lower() or STORE_MEMORY
        if store not in (STORE_MEMORY, STORE_NEO4J):
            raise ValueError(f"Unknown agenda store {self.store!r}.")
        object.__setattr__(self, "store", store)
        object.__setattr__(self, "key_mode", KeyMode(self.key_mode))

    @classmethod
    def from_env(cls) -> "AgendaSettings":
        return cls(
            store=os.environ.get("AGENDA_STORE", STORE_MEMORY),
            key_mode=os.environ.get("AGENDA_KEY_MODE", KeyMode.SEQUENTIAL.value).strip().lower(),
            validate=_env_flag("AGENDA_VALIDATE", True),
            strict_numbers=_env_flag("AGENDA_STRICT_NUMBERS", True),
            neo4j_uri=os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip(),
            neo4j_user=os.environ.get("NEO4J_USER", "neo4j").strip(),
            neo4j_password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
        )
