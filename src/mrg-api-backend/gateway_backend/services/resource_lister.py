# Standard Library
from typing import List, Optional, Protocol

# Third Party
from aws_lambda_powertools import Logger
from fastapi.concurrency import run_in_threadpool

# Local Modules
from gateway_backend.exceptions import InvalidRequestError, ProviderError
from gateway_backend.models import (
    AssetRecord,
    AssetSummary,
    ListingRequest,
    ProviderPage,
)
from gateway_backend.services.projection import project_records
from gateway_backend.utils import (
    DEFAULT_MAX_PROVIDER_PAGES,
    DEFAULT_MAX_RESULTS,
    PROVIDER_PAGE_LIMIT,
    DeliveryType,
)

# Initialize logger
logger = Logger(service="resource_lister")


class ListingClient(Protocol):
    """The provider primitive the lister paginates over."""

    def list_page(
        self,
        prefix: str,
        max_results: int,
        next_cursor: Optional[str] = None,
        delivery_type: DeliveryType = DeliveryType.upload,
    ) -> ProviderPage: ...


class ResourceLister:
    """Lists every asset under a prefix, following provider cursors."""

    def __init__(
        self,
        client: ListingClient,
        max_provider_pages: int = DEFAULT_MAX_PROVIDER_PAGES,
    ) -> None:
        """Initialize the resource lister.

        Parameters
        ----------
        client : ListingClient
            A ready, authenticated provider client.
        max_provider_pages : int, optional
            Floor of the provider call ceiling for a single listing, by
            default 100. A listing may always make up to ``max_results``
            calls, one record per call.
        """
        self._client = client
        self.max_provider_pages = max_provider_pages

    @staticmethod
    def build_request(
        prefix: Optional[str], max_results: int = DEFAULT_MAX_RESULTS
    ) -> ListingRequest:
        """Validates the prefix and clamps the result cap.

        Raises
        ------
        InvalidRequestError
            If the prefix is missing, empty or whitespace-only.
        """
        if prefix is None or not prefix.strip():
            raise InvalidRequestError()
        return ListingRequest(prefix=prefix, max_results=max_results)

    async def list_resources(
        self, prefix: Optional[str], max_results: int = DEFAULT_MAX_RESULTS
    ) -> List[AssetSummary]:
        """Lists the assets stored under ``prefix``.

        Parameters
        ----------
        prefix : Optional[str]
            Folder-like prefix, e.g. ``trymygold/gold_chains``.
        max_results : int, optional
            Maximum number of assets to return, clamped to [1, 1000].

        Returns
        -------
        List[AssetSummary]
            At most ``max_results`` summaries in provider order.

        Raises
        ------
        InvalidRequestError
            If the prefix is empty. No provider call is made.
        ProviderError
            If any provider call fails. No partial result is returned.
        """
        request = self.build_request(prefix, max_results)
        records = await self.collect_records(request)
        return project_records(records)

    def page_ceiling(self, request: ListingRequest) -> int:
        """Maximum provider calls allowed for ``request``.

        Every page that makes progress adds at least one record, so
        ``max_results`` calls always suffice.
        """
        return max(self.max_provider_pages, request.max_results)

    async def collect_records(
        self, request: ListingRequest
    ) -> List[AssetRecord]:
        """Pages through the provider until the cap or the last page."""
        records: List[AssetRecord] = []
        next_cursor: Optional[str] = None
        pages = 0
        max_pages = self.page_ceiling(request)

        while True:
            if pages >= max_pages:
                logger.error(
                    f"Listing for prefix {request.prefix!r} still had a "
                    f"cursor after {pages} provider calls"
                )
                raise ProviderError(
                    f"Pagination exceeded {max_pages} pages"
                )

            per_call_limit = min(
                PROVIDER_PAGE_LIMIT, request.max_results - len(records)
            )
            # The SDK call is blocking; pages stay strictly sequential
            page = await run_in_threadpool(
                self._client.list_page,
                prefix=request.prefix,
                max_results=per_call_limit,
                next_cursor=next_cursor,
                delivery_type=DeliveryType.upload,
            )
            pages += 1

            records.extend(page.resources[:per_call_limit])
            next_cursor = page.next_cursor

            if not next_cursor or len(records) >= request.max_results:
                break

        logger.info(
            f"Listed {len(records)} resources for prefix {request.prefix!r} "
            f"in {pages} provider call(s)"
        )
        return records
