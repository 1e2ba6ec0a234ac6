"""Catalog Lifecycle — process-wide service singletons and FastAPI dependencies.

Invariants:
    - Services constructed once on startup via init_catalog (lifespan)
    - init_catalog is idempotent: an existing catalog is never rebuilt
    - Dependencies raise CatalogNotReadyError if startup never ran

Design Decisions:
    - Module-level singletons initialized on startup: same shape as a DB session
      manager, FastAPI lifespan owns the lifecycle (ADR: no global import side effects)
    - reset_catalog on shutdown keeps repeated app startups (tests) independent
"""

import logging

from demo_api.core.errors import CatalogNotReadyError
from demo_api.services.product_service import ProductService
from demo_api.services.user_service import UserService

logger = logging.getLogger(__name__)

# Singletons (initialized on startup)
product_service: ProductService | None = None
user_service: UserService | None = None


def init_catalog() -> None:
    global product_service, user_service
    if product_service is None:
        product_service = ProductService()
        logger.info(
            "Product catalog seeded",
            extra={"item_count": len(product_service.get_all_products())},
        )
    if user_service is None:
        user_service = UserService()
        logger.info(
            "User catalog seeded",
            extra={"item_count": len(user_service.get_all_users())},
        )


def reset_catalog() -> None:
    global product_service, user_service
    product_service = None
    user_service = None


def is_ready() -> bool:
    return product_service is not None and user_service is not None


def get_product_service() -> ProductService:
    """FastAPI dependency for the product accessor."""
    if product_service is None:
        raise CatalogNotReadyError("Product")
    return product_service


def get_user_service() -> UserService:
    """FastAPI dependency for the user accessor."""
    if user_service is None:
        raise CatalogNotReadyError("User")
    return user_service
