# Standard Library
from typing import Optional

# Third Party
from aws_lambda_powertools import Logger
from fastapi import Depends

# Local Modules
from gateway_backend.config import GatewaySettings, get_settings
from gateway_backend.provider import CloudinaryClient
from gateway_backend.services import ResourceLister

# Initialize logger
logger = Logger(service="dependencies")

# Cache the provider client across warm invocations
cloudinary_client: Optional[CloudinaryClient] = None


def get_cloudinary_client(
    settings: GatewaySettings = Depends(get_settings),
) -> CloudinaryClient:
    """Get or create the Cloudinary client built from the settings.

    Parameters
    ----------
    settings : GatewaySettings
        The gateway settings holding the Cloudinary credentials.

    Returns
    -------
    CloudinaryClient
        The shared Cloudinary client.
    """
    global cloudinary_client
    if cloudinary_client is None:
        if not settings.cloudinary_cloud_name:
            logger.warning(
                "CLOUDINARY_CLOUD_NAME is not set; provider calls will fail"
            )
        cloudinary_client = CloudinaryClient(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key.get_secret_value(),
            api_secret=settings.cloudinary_api_secret.get_secret_value(),
            resource_type=settings.cloudinary_resource_type,
            timeout=settings.provider_timeout,
        )
        logger.debug(
            f"Initialized Cloudinary client for cloud "
            f"{settings.cloudinary_cloud_name!r}"
        )
    return cloudinary_client


def get_resource_lister(
    client: CloudinaryClient = Depends(get_cloudinary_client),
    settings: GatewaySettings = Depends(get_settings),
) -> ResourceLister:
    """Build a resource lister around the shared provider client.

    Parameters
    ----------
    client : CloudinaryClient
        The provider client.
    settings : GatewaySettings
        The gateway settings holding the page ceiling.

    Returns
    -------
    ResourceLister
        A lister scoped to the current request.
    """
    return ResourceLister(
        client=client, max_provider_pages=settings.max_provider_pages
    )
