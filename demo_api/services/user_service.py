"""User Service — accessor over the seeded user sequence.

Invariants:
    - Sequence built once in __init__, never mutated afterwards
    - get_all_users returns the held tuple itself (same object every call)
"""

from demo_api.core.domain_types import User
from demo_api.core.seed_data import SEED_SIZE, build_users


class UserService:
    """Holds the fixed user catalog."""

    def __init__(self, count: int = SEED_SIZE):
        self._users = build_users(count)

    def get_all_users(self) -> tuple[User, ...]:
        return self._users
