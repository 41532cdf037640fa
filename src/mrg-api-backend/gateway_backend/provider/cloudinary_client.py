# Standard Library
from typing import Any, Dict, Optional

# Third Party
import cloudinary.api
from aws_lambda_powertools import Logger
from cloudinary.exceptions import Error as CloudinaryError

# Local Modules
from gateway_backend.exceptions import ProviderError
from gateway_backend.models import ProviderPage
from gateway_backend.utils import DeliveryType, ResourceType, redact_secrets

# Initialize logger
logger = Logger(service="cloudinary_client")


class CloudinaryClient:
    """A client for listing assets through the Cloudinary Admin API.

    Credentials are passed to the SDK on every call instead of through the
    SDK's global ``cloudinary.config``, so separate instances never share
    state.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        resource_type: ResourceType = ResourceType.image,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialize the Cloudinary client.

        Parameters
        ----------
        cloud_name : str
            The Cloudinary cloud (account) name.
        api_key : str
            The Admin API key.
        api_secret : str
            The Admin API secret.
        resource_type : ResourceType, optional
            The kind of resource to list, by default ``image``.
        timeout : Optional[float], optional
            Per-call timeout in seconds, by default the SDK's own.
        """
        self.cloud_name = cloud_name
        self.resource_type = ResourceType(resource_type)
        self.timeout = timeout
        self._api_key = api_key
        self._api_secret = api_secret

    def _call_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "cloud_name": self.cloud_name,
            "api_key": self._api_key,
            "api_secret": self._api_secret,
            "resource_type": self.resource_type.value,
        }
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options

    def _redact(self, message: str) -> str:
        return redact_secrets(message, (self._api_key, self._api_secret))

    def list_page(
        self,
        prefix: str,
        max_results: int,
        next_cursor: Optional[str] = None,
        delivery_type: DeliveryType = DeliveryType.upload,
    ) -> ProviderPage:
        """Fetch one page of resources stored under a prefix.

        Parameters
        ----------
        prefix : str
            Folder-like prefix to filter public IDs by.
        max_results : int
            Maximum number of records the provider may return for this call.
        next_cursor : Optional[str], optional
            Cursor returned by the previous page. Omitted on the first call.
        delivery_type : DeliveryType, optional
            The delivery type to list, by default ``upload``.

        Returns
        -------
        ProviderPage
            The records of this page and the cursor for the next one.

        Raises
        ------
        ProviderError
            If the call fails or the response cannot be parsed.
        """
        params: Dict[str, Any] = {
            "type": DeliveryType(delivery_type).value,
            "prefix": prefix,
            "max_results": max_results,
        }
        if next_cursor:
            params["next_cursor"] = next_cursor

        try:
            response = cloudinary.api.resources(
                **params, **self._call_options()
            )
        except CloudinaryError as e:
            message = self._redact(str(e))
            logger.error(
                f"Cloudinary rejected listing for prefix {prefix!r}: "
                f"{message}"
            )
            raise ProviderError(message) from e
        except Exception as e:
            message = self._redact(str(e))
            logger.exception(
                f"Failed to list Cloudinary resources for prefix "
                f"{prefix!r}: {message}"
            )
            raise ProviderError(message) from e

        try:
            return ProviderPage.model_validate(dict(response))
        except (TypeError, ValueError) as e:
            logger.error(
                f"Malformed Cloudinary response for prefix {prefix!r}: {e}"
            )
            raise ProviderError(
                "Malformed response from Cloudinary"
            ) from e
