"""Exception handlers mapping gateway errors onto JSON responses."""

# Third Party
from aws_lambda_powertools import Logger
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local Modules
from gateway_backend.config import get_settings
from gateway_backend.exceptions import (
    PROVIDER_ERROR,
    InvalidRequestError,
    ProviderError,
)
from gateway_backend.models import ErrorResponse

# Initialize logger
logger = Logger(service="exception_handlers")

INTERNAL_ERROR = "Internal server error"


async def invalid_request_handler(
    request: Request, exc: InvalidRequestError
) -> JSONResponse:
    """Return a 400 with the static validation message."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=exc.message).model_dump(
            exclude_none=True
        ),
    )


async def provider_error_handler(
    request: Request, exc: ProviderError
) -> JSONResponse:
    """Return a 500 for provider failures.

    The upstream message is only included as ``details`` when the settings
    allow it. It never contains credentials.
    """
    logger.error(f"Provider error on {request.url.path}: {exc.message}")

    details = exc.message if get_settings().show_error_details else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=PROVIDER_ERROR, details=details).model_dump(
            exclude_none=True
        ),
    )


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Return a generic 500 without echoing the exception."""
    logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=INTERNAL_ERROR).model_dump(
            exclude_none=True
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the gateway's exception handlers on ``app``."""
    app.add_exception_handler(InvalidRequestError, invalid_request_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
