# Standard Library
from typing import Dict, Any

# Third Party
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from mangum import Mangum
from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

# Local Modules
from gateway_backend import router
from gateway_backend.config import get_settings
from gateway_backend.exception_handlers import register_exception_handlers
from gateway_backend.models import HealthResponse

# Initialize a logger
logger = Logger()

# Load settings once at cold start
settings = get_settings()

# Get the API prefix from settings or default to '/api'
api_prefix = settings.api_prefix.rstrip("/")

USAGE_HINT = (
    f"Media resource gateway - API is at {api_prefix}/resources/{{folder}}. "
    f"Example: {api_prefix}/resources/trymygold/gold_chains"
)

# Create a FastAPI application instance
app = FastAPI(
    title="Media Resource Gateway API",
    version="0.1.0",
    description="Lists Cloudinary assets by folder path.",
    docs_url=f"{api_prefix}/docs",
    redoc_url=f"{api_prefix}/redoc",
    openapi_url=f"{api_prefix}/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/_health", response_model=HealthResponse, tags=["Health"])
async def health() -> HealthResponse:
    """Health check endpoint.

    Returns
    -------
    HealthResponse
        Always ``{"status": "ok"}`` while the process is serving.
    """
    return HealthResponse(status="ok")


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    """Plain-text hint for visitors opening the service URL in a browser."""
    return USAGE_HINT


# Add the API router to the FastAPI app
app.include_router(router, prefix=api_prefix)

# Initialize Mangum handler globally
# This instance will be reused across invocations in a warm Lambda environment.
lambda_asgi_handler = Mangum(app, lifespan="off")


@logger.inject_lambda_context(
    log_event=True, correlation_id_path=correlation_paths.API_GATEWAY_HTTP
)
def lambda_handler(
    event: Dict[str, Any], context: LambdaContext
) -> Dict[str, Any]:
    """Lambda handler function to adapt the FastAPI app for AWS Lambda.

    Parameters
    ----------
    event : Dict[str, Any]
        The event data passed to the Lambda function.
    context : LambdaContext
        The context object containing runtime information.

    Returns
    -------
    Dict[str, Any]
        The response from the FastAPI application.
    """
    # Return the response from the FastAPI application
    return lambda_asgi_handler(event, context)


def serve() -> None:
    """Run the gateway locally with uvicorn on the configured port."""
    logger.info(f"Server listening on {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    serve()
