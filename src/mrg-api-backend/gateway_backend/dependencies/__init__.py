"""FastAPI dependencies for the gateway backend."""

# Local Modules
from gateway_backend.dependencies.dependencies import (
    get_cloudinary_client,
    get_resource_lister,
)

__all__ = [
    "get_cloudinary_client",
    "get_resource_lister",
]
