"""Utility functions for the gateway backend.

This module provides helper functions and enums that can be used across the
gateway backend.
"""

# Local Modules
from gateway_backend.utils.helpers import (
    DEFAULT_MAX_RESULTS,
    MAX_RESULTS_CEILING,
    PROVIDER_PAGE_LIMIT,
    DEFAULT_MAX_PROVIDER_PAGES,
    clamp_max_results,
    parse_max_results,
    redact_secrets,
)
from gateway_backend.utils.enums import (
    DeliveryType,
    Environment,
    ResourceType,
)

__all__ = [
    "DEFAULT_MAX_RESULTS",
    "MAX_RESULTS_CEILING",
    "PROVIDER_PAGE_LIMIT",
    "DEFAULT_MAX_PROVIDER_PAGES",
    "clamp_max_results",
    "parse_max_results",
    "redact_secrets",
    "DeliveryType",
    "Environment",
    "ResourceType",
]
