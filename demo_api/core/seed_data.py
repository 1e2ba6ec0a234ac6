"""Seed Data — pure builders for the fixed product and user sequences.

Invariants:
    - Index runs 1..count inclusive, in order
    - Product i: name "Product{i}", price i * 10.0
    - User i: name "User{i}", email "user{i}@example.com"
    - Builders return tuples (immutable), never lists

Design Decisions:
    - count parameter defaults to SEED_SIZE so tests can build smaller catalogs
"""

from demo_api.core.domain_types import Product, User

SEED_SIZE = 10


def build_products(count: int = SEED_SIZE) -> tuple[Product, ...]:
    """Build products 1..count in index order."""
    _check_count(count)
    return tuple(
        Product(name=f"Product{i}", price=i * 10.0)
        for i in range(1, count + 1)
    )


def build_users(count: int = SEED_SIZE) -> tuple[User, ...]:
    """Build users 1..count in index order."""
    _check_count(count)
    return tuple(
        User(name=f"User{i}", email=f"user{i}@example.com")
        for i in range(1, count + 1)
    )


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"seed count must be >= 0, got {count}")
