"""Provider module for the gateway backend.

This module provides the client for the Cloudinary Admin API used to list
uploaded assets.
"""

# Local Modules
from gateway_backend.provider.cloudinary_client import CloudinaryClient

__all__ = [
    "CloudinaryClient",
]
