# Standard Library
from typing import List, Optional

# Third Party
from aws_lambda_powertools import Logger
from fastapi import APIRouter, Depends, Path, Query

# Local Modules
from gateway_backend.dependencies import get_resource_lister
from gateway_backend.exceptions import InvalidRequestError
from gateway_backend.models import AssetSummary, ErrorResponse
from gateway_backend.services import ResourceLister
from gateway_backend.utils import parse_max_results

# Initialize logger
logger = Logger(service="resources")

# Initialize router for asset listing
router = APIRouter(
    prefix="/resources",
    tags=["Resources"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", include_in_schema=False)
@router.get("/", include_in_schema=False)
async def missing_folder_path() -> None:
    """Rejects listing requests that carry no folder path at all."""
    raise InvalidRequestError()


@router.get("/{prefix:path}", response_model=List[AssetSummary])
async def list_resources(
    prefix: str = Path(
        ...,
        description="Folder path, one or more segments, e.g. a/b/c",
    ),
    max_results: Optional[str] = Query(
        None,
        description=(
            "Maximum number of assets to return. Defaults to 500 and is "
            "clamped to 1-1000."
        ),
    ),
    lister: ResourceLister = Depends(get_resource_lister),
) -> List[AssetSummary]:
    """Lists the assets stored under a folder path.

    Parameters
    ----------
    **prefix** : str
        Folder-like prefix, e.g. ``trymygold/gold_chains``.
    **max_results** : Optional[str]
        Maximum number of assets to return. Missing or non-numeric values
        fall back to 500.

    Returns
    -------
    List[AssetSummary]
        The assets in provider order, at most ``max_results`` of them.

    Raises
    ------
    InvalidRequestError
        If the folder path is empty or whitespace-only (HTTP 400).
    ProviderError
        If Cloudinary fails (HTTP 500).
    """
    cap = parse_max_results(max_results)
    logger.debug(f"Listing resources under {prefix!r} (max {cap})")
    return await lister.list_resources(prefix, cap)
