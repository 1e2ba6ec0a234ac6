"""Pydantic Schemas — response models for API endpoints.

Design Decisions:
    - Separate from core: schemas are API contracts, dataclasses are domain (ADR: DDD boundary)
"""
