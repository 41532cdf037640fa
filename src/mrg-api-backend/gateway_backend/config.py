"""Gateway configuration."""

# Standard Library
from functools import lru_cache
from typing import List, Optional

# Third Party
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local Modules
from gateway_backend.utils import (
    DEFAULT_MAX_PROVIDER_PAGES,
    Environment,
    ResourceType,
)


class GatewaySettings(BaseSettings):
    """Gateway settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cloudinary credentials
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: SecretStr = SecretStr("")
    cloudinary_api_secret: SecretStr = SecretStr("")
    cloudinary_resource_type: ResourceType = ResourceType.image

    # Provider call limits
    provider_timeout: float = Field(default=30.0, gt=0)
    max_provider_pages: int = Field(
        default=DEFAULT_MAX_PROVIDER_PAGES, ge=1
    )

    # HTTP surface
    api_prefix: str = "/api"
    cors_origins: str = "*"  # Comma-separated list
    port: int = 3000

    # Error reporting
    environment: Environment = Environment.production
    expose_error_details: Optional[bool] = None

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [
            origin.strip()
            for origin in self.cors_origins.split(",")
            if origin.strip()
        ]

    @property
    def show_error_details(self) -> bool:
        """Whether provider error text is returned to API clients.

        An explicit ``EXPOSE_ERROR_DETAILS`` wins; otherwise details are only
        shown in development.
        """
        if self.expose_error_details is not None:
            return self.expose_error_details
        return self.environment == Environment.development


@lru_cache
def get_settings() -> GatewaySettings:
    """Get cached gateway settings."""
    return GatewaySettings()
