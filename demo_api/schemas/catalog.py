"""Catalog Schemas — Pydantic response models for the read-only catalog endpoints.

Invariants:
    - ProductRead serializes exactly {name, price}
    - UserRead serializes exactly {name, email}
    - Built from core dataclasses via from_attributes, never by hand

Design Decisions:
    - Separate from core/domain_types: schemas are the API contract,
      dataclasses are the domain (ADR: DDD boundary)
"""

from pydantic import BaseModel, ConfigDict


class ProductRead(BaseModel):
    """Public product representation."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    price: float


class UserRead(BaseModel):
    """Public user representation."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str
    email: str


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    status: str
    service: str
    version: str
    catalog: str
