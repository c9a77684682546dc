"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and the
chains the connector serves.
"""

from fastapi import APIRouter

from nft_connector.core.config import settings
from nft_connector.domain.nft.chains import SUPPORTED_CHAINS
from nft_connector.interfaces.nft.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and chains.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok", version=settings.version, chains=list(SUPPORTED_CHAINS)
    )
