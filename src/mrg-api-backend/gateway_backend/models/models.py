# Standard Library
from typing import List, Optional

# Third Party
from pydantic import BaseModel, Field, ConfigDict, field_validator

# Local Modules
from gateway_backend.utils import DEFAULT_MAX_RESULTS, clamp_max_results


# --- Request Models ---
class ListingRequest(BaseModel):
    """A validated request to list assets under a folder prefix."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    prefix: str = Field(
        ..., description="Folder-like prefix, e.g. trymygold/gold_chains"
    )
    max_results: int = Field(
        DEFAULT_MAX_RESULTS,
        description="Maximum number of assets to return, clamped to 1-1000",
    )

    @field_validator("max_results")
    @classmethod
    def clamp(cls, value: int) -> int:
        return clamp_max_results(value)


# --- Provider Models ---
class AssetRecord(BaseModel):
    """A single resource as returned by the provider's listing API.

    Only the fields the gateway projects are declared; anything else the
    provider sends is ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    public_id: str = Field(..., description="Provider identifier")
    secure_url: Optional[str] = Field(None, description="HTTPS delivery URL")
    format: Optional[str] = Field(None, description="File format, e.g. jpg")
    width: Optional[int] = Field(None, description="Width in pixels")
    height: Optional[int] = Field(None, description="Height in pixels")
    bytes: Optional[int] = Field(None, description="Size in bytes")
    created_at: Optional[str] = Field(
        None, description="Upload timestamp as reported by the provider"
    )


class ProviderPage(BaseModel):
    """One page of results from the provider's listing API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    resources: List[AssetRecord] = Field(
        default_factory=list, description="Records in provider order"
    )
    next_cursor: Optional[str] = Field(
        None, description="Cursor for the next page, absent when exhausted"
    )


# --- Response Models ---
class AssetSummary(BaseModel):
    """Compact, client-facing description of an asset."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    public_id: str = Field(
        ..., alias="publicId", description="Provider identifier"
    )
    src: Optional[str] = Field(None, description="HTTPS delivery URL")
    format: Optional[str] = Field(None, description="File format, e.g. jpg")
    width: Optional[int] = Field(None, description="Width in pixels")
    height: Optional[int] = Field(None, description="Height in pixels")
    bytes: Optional[int] = Field(None, description="Size in bytes")
    created_at: Optional[str] = Field(
        None, alias="createdAt", description="Upload timestamp"
    )


class ErrorResponse(BaseModel):
    """Response body for failed requests."""

    error: str = Field(..., description="Short error description")
    details: Optional[str] = Field(
        None, description="Upstream error text, when exposure is enabled"
    )


class HealthResponse(BaseModel):
    """Response body for the health check."""

    status: str = Field("ok", description="Service status")
