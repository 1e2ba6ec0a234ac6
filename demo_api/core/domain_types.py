"""Domain Types — immutable catalog records held for the process lifetime.

Invariants:
    - Product and User are frozen: no field can change after construction
    - Records carry no identity beyond their position in the seeded sequence

Design Decisions:
    - Frozen dataclasses over Pydantic models: core stays free of API concerns,
      schemas/ owns serialization (ADR: DDD boundary)
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Product:
    """A catalog product."""
    name: str
    price: float


@dataclass(frozen=True)
class User:
    """A catalog user."""
    name: str
    email: str


# ─── Enums ───────────────────────────────────────────────────────

class CatalogStatus(str, Enum):
    """Catalog lifecycle as reported by the health probe."""
    READY = "ready"
    NOT_READY = "not_ready"
