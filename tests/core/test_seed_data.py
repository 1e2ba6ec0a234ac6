"""Seed Data — verifies the fixed product and user sequences.

Tests:
    - Default size is 10, in index order 1..10
    - Product i has name "Product{i}" and price i * 10.0
    - User i has name "User{i}" and email "user{i}@example.com"
    - Builders return tuples; negative counts rejected
"""

import pytest

from demo_api.core.domain_types import Product, User
from demo_api.core.seed_data import SEED_SIZE, build_products, build_users


def test_seed_size_is_ten():
    assert SEED_SIZE == 10
    assert len(build_products()) == 10
    assert len(build_users()) == 10


def test_products_follow_index_pattern():
    for i, product in enumerate(build_products(), start=1):
        assert product.name == f"Product{i}"
        assert product.price == i * 10.0


def test_users_follow_index_pattern():
    for i, user in enumerate(build_users(), start=1):
        assert user.name == f"User{i}"
        assert user.email == f"user{i}@example.com"


def test_first_and_last_product():
    products = build_products()
    assert products[0] == Product(name="Product1", price=10.0)
    assert products[-1] == Product(name="Product10", price=100.0)


def test_first_and_last_user():
    users = build_users()
    assert users[0] == User(name="User1", email="user1@example.com")
    assert users[-1] == User(name="User10", email="user10@example.com")


def test_price_is_float():
    assert all(isinstance(p.price, float) for p in build_products())


def test_builders_return_tuples():
    assert isinstance(build_products(), tuple)
    assert isinstance(build_users(), tuple)


def test_builders_are_deterministic():
    assert build_products() == build_products()
    assert build_users() == build_users()


def test_custom_count():
    assert [p.name for p in build_products(3)] == ["Product1", "Product2", "Product3"]
    assert build_users(0) == ()


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        build_products(-1)
    with pytest.raises(ValueError):
        build_users(-5)
