"""Product Service — accessor over the seeded product sequence.

Invariants:
    - Sequence built once in __init__, never mutated afterwards
    - get_all_products returns the held tuple itself (same object every call)
"""

from demo_api.core.domain_types import Product
from demo_api.core.seed_data import SEED_SIZE, build_products


class ProductService:
    """Holds the fixed product catalog."""

    def __init__(self, count: int = SEED_SIZE):
        self._products = build_products(count)

    def get_all_products(self) -> tuple[Product, ...]:
        return self._products
