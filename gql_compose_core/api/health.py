"""
Health and status endpoints.
"""

from fastapi import APIRouter
from gql_compose_core.api.models import HealthResponse
from gql_compose_core.version import __version__

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
def health():
    """Get API health status"""
    return HealthResponse(
        status="healthy",
        version=__version__
    )
