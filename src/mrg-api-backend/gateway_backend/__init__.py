"""Media resource gateway backend.

Exposes the Cloudinary asset listing API under ``/api/resources``.
"""

# Local Modules
from gateway_backend.api import router

__all__ = [
    "router",
]
