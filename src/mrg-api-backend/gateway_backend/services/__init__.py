"""Services for the gateway backend."""

# Local Modules
from gateway_backend.services.projection import (
    project_record,
    project_records,
)
from gateway_backend.services.resource_lister import (
    ListingClient,
    ResourceLister,
)

__all__ = [
    "project_record",
    "project_records",
    "ListingClient",
    "ResourceLister",
]
