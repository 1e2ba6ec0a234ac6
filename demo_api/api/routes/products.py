"""Products Route — GET endpoint listing the seeded product catalog.

Invariants:
    - Response is the full catalog in seed order, never filtered or paged
    - No query parameters, headers or body consumed
"""

from fastapi import APIRouter, Depends

from demo_api.schemas.catalog import ProductRead
from demo_api.services.catalog import get_product_service
from demo_api.services.product_service import ProductService

router = APIRouter(tags=["products"])


@router.get("/get-all-products", response_model=list[ProductRead])
async def get_all_products(
    service: ProductService = Depends(get_product_service),
):
    return [ProductRead.model_validate(p) for p in service.get_all_products()]
