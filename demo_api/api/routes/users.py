"""Users Route — GET endpoint listing the seeded user catalog.

Invariants:
    - Response is the full catalog in seed order, never filtered or paged
    - No query parameters, headers or body consumed
"""

from fastapi import APIRouter, Depends

from demo_api.schemas.catalog import UserRead
from demo_api.services.catalog import get_user_service
from demo_api.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.get("/get-all-users", response_model=list[UserRead])
async def get_all_users(service: UserService = Depends(get_user_service)):
    return [UserRead.model_validate(u) for u in service.get_all_users()]
