"""This module initializes the models for the gateway backend.

It imports the listing request model, the provider page and record models,
and the response models returned to API clients.
"""

# Local Modules
from gateway_backend.models.models import (
    ListingRequest,
    AssetRecord,
    ProviderPage,
    AssetSummary,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ListingRequest",
    "AssetRecord",
    "ProviderPage",
    "AssetSummary",
    "ErrorResponse",
    "HealthResponse",
]
