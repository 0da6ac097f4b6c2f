"""
API module for gql-compose-core.
"""

from .models import MergeRequest, MergeResponse, HealthResponse
from .api import app

__all__ = [
    "MergeRequest",
    "MergeResponse",
    "HealthResponse",
    "app"
]
