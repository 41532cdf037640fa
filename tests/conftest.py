"""Shared fixtures for the gateway backend tests."""

# Standard Library
import importlib.util
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Third Party
import pytest

# Local Modules
import gateway_backend.dependencies.dependencies as deps_module
from gateway_backend.config import get_settings
from gateway_backend.models import AssetRecord, ProviderPage
from gateway_backend.utils import DeliveryType

BACKEND_DIR = Path(__file__).resolve().parents[1] / "src" / "mrg-api-backend"


def import_handler() -> Any:
    """Import a fresh copy of ``handler.py`` so it reads the current env."""
    get_settings.cache_clear()
    spec = importlib.util.spec_from_file_location(
        "handler", BACKEND_DIR / "handler.py"
    )
    module = importlib.util.module_from_spec(spec)
    sys.modules["handler"] = module
    spec.loader.exec_module(module)
    return module


def make_record(index: int, **extra: Any) -> Dict[str, Any]:
    """Build a provider-native resource dict like Cloudinary returns."""
    record = {
        "asset_id": f"asset-{index}",
        "public_id": f"trymygold/gold_chains/chain_{index}",
        "secure_url": (
            f"https://res.cloudinary.com/demo/image/upload/v1/"
            f"trymygold/gold_chains/chain_{index}.jpg"
        ),
        "format": "jpg",
        "width": 800 + index,
        "height": 600 + index,
        "bytes": 1000 * index,
        "created_at": "2024-05-01T10:00:00Z",
        "resource_type": "image",
        "type": "upload",
    }
    record.update(extra)
    return record


def make_page(
    start: int, count: int, next_cursor: Optional[str] = None
) -> ProviderPage:
    return ProviderPage(
        resources=[
            AssetRecord.model_validate(make_record(i))
            for i in range(start, start + count)
        ],
        next_cursor=next_cursor,
    )


class FakeListingClient:
    """In-memory stand-in for ``CloudinaryClient``.

    Returns the queued pages in order, or an endless supply of full pages
    with a cursor when ``endless`` is set.
    """

    def __init__(
        self,
        pages: Optional[List[ProviderPage]] = None,
        endless: bool = False,
        error: Optional[Exception] = None,
    ) -> None:
        self.pages = list(pages or [])
        self.endless = endless
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def list_page(
        self,
        prefix: str,
        max_results: int,
        next_cursor: Optional[str] = None,
        delivery_type: DeliveryType = DeliveryType.upload,
    ) -> ProviderPage:
        self.calls.append(
            {
                "prefix": prefix,
                "max_results": max_results,
                "next_cursor": next_cursor,
                "delivery_type": delivery_type,
            }
        )
        if self.error is not None:
            raise self.error
        if self.endless:
            start = 500 * (len(self.calls) - 1)
            return make_page(start, 500, next_cursor=f"cursor-{len(self.calls)}")
        return self.pages.pop(0)


@pytest.fixture(autouse=True)
def reset_gateway_state(monkeypatch):
    """Isolate cached settings and the shared provider client per test."""
    for name in (
        "CLOUDINARY_CLOUD_NAME",
        "CLOUDINARY_API_KEY",
        "CLOUDINARY_API_SECRET",
        "ENVIRONMENT",
        "EXPOSE_ERROR_DETAILS",
        "API_PREFIX",
        "CORS_ORIGINS",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    deps_module.cloudinary_client = None
    yield
    get_settings.cache_clear()
    deps_module.cloudinary_client = None
