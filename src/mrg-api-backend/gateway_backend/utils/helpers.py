"""Utility functions for the gateway backend."""

# Standard Library
import re
from typing import Iterable, Optional

# Third Party
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="gateway_backend.utils.helpers")

# Listing limits
DEFAULT_MAX_RESULTS = 500
MAX_RESULTS_CEILING = 1000
PROVIDER_PAGE_LIMIT = 500
DEFAULT_MAX_PROVIDER_PAGES = 100

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

REDACTED = "[REDACTED]"


def clamp_max_results(max_results: int) -> int:
    """Clamps a requested result cap to the inclusive range [1, 1000].

    Parameters
    ----------
    max_results : int
        The caller's requested result cap.

    Returns
    -------
    int
        The cap actually used for the listing.
    """
    return max(1, min(MAX_RESULTS_CEILING, max_results))


def parse_max_results(
    raw_value: Optional[str], default: int = DEFAULT_MAX_RESULTS
) -> int:
    """Parses the ``max_results`` query string value.

    Missing or non-numeric values fall back to ``default``. The parsed value
    is clamped with :func:`clamp_max_results`.

    Parameters
    ----------
    raw_value : Optional[str]
        The raw query string value, if any.
    default : int
        Value used when ``raw_value`` is missing or not an integer.

    Returns
    -------
    int
        The clamped result cap.
    """
    if raw_value is None or not raw_value.strip():
        return clamp_max_results(default)

    value = raw_value.strip()
    if INTEGER_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        logger.debug(
            f"Ignoring non-numeric max_results value {raw_value!r}, "
            f"using default {default}"
        )
        parsed = default

    return clamp_max_results(parsed)


def redact_secrets(message: str, secrets: Iterable[Optional[str]]) -> str:
    """Replaces every occurrence of the given secrets in ``message``.

    Parameters
    ----------
    message : str
        Text that may contain credential material.
    secrets : Iterable[Optional[str]]
        Secret values to strip. Empty values are skipped.

    Returns
    -------
    str
        The message with each secret replaced by ``[REDACTED]``.
    """
    for secret in secrets:
        if secret:
            message = message.replace(secret, REDACTED)
    return message
