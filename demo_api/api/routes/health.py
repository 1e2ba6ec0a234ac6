"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - Catalog state is reported, never used to fail the probe
"""

from fastapi import APIRouter, status

from demo_api import SERVICE_NAME, __version__
from demo_api.core.domain_types import CatalogStatus
from demo_api.schemas.catalog import HealthResponse
from demo_api.services import catalog

router = APIRouter(tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=__version__,
        catalog=(
            CatalogStatus.READY if catalog.is_ready()
            else CatalogStatus.NOT_READY
        ).value,
    )
