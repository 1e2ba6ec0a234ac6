"""Domain Types — verifies catalog records are immutable value objects.

Tests:
    - Product and User reject field assignment (frozen)
    - Equal fields compare equal
    - CatalogStatus serializes to string
"""

from dataclasses import FrozenInstanceError

import pytest

from demo_api.core.domain_types import CatalogStatus, Product, User


def test_product_is_frozen():
    product = Product(name="Product1", price=10.0)
    with pytest.raises(FrozenInstanceError):
        product.price = 99.0


def test_user_is_frozen():
    user = User(name="User1", email="user1@example.com")
    with pytest.raises(FrozenInstanceError):
        user.email = "other@example.com"


def test_records_compare_by_value():
    assert Product("Product3", 30.0) == Product("Product3", 30.0)
    assert User("User3", "user3@example.com") != User("User4", "user4@example.com")


def test_catalog_status_values():
    assert CatalogStatus.READY.value == "ready"
    assert CatalogStatus.NOT_READY.value == "not_ready"
    assert set(CatalogStatus) == {CatalogStatus.READY, CatalogStatus.NOT_READY}
