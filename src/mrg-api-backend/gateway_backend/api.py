# Third Party
from fastapi import APIRouter

# Local Modules
from gateway_backend.routers import resources

# Create a router instance with a default prefix
router = APIRouter()

# Include other routers
router.include_router(resources.router)
