"""
Main entrypoint for the Farm Manager API.

This module assembles the FastAPI application, sets up logging,
builds the service registry and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn farm_manager_api.app.main:app --reload

Service errors are translated to JSON responses here so that routers
never need to catch them.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import (
    BackendUnavailable,
    FarmServiceError,
    InvalidArgument,
    NotFound,
    PartialFailure,
    RequestFailed,
)
from .core.logging_config import setup_logging
from .services.registry import ServiceRegistry, build_registry

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidArgument: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    RequestFailed: status.HTTP_502_BAD_GATEWAY,
    PartialFailure: status.HTTP_502_BAD_GATEWAY,
    BackendUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


async def service_error_handler(request: Request, exc: FarmServiceError) -> JSONResponse:
    """Render a service error as ``{"detail": ..., "error": <kind>}``."""
    status_code = ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    body = {"detail": exc.message, "error": exc.kind}
    if isinstance(exc, PartialFailure):
        body["failed"] = exc.failed
        body["total"] = exc.total
    return JSONResponse(status_code=status_code, content=body)


def create_app(registry: Optional[ServiceRegistry] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    registry : Optional[ServiceRegistry]
        Services to serve.  When omitted, a registry is built from
        ``settings`` (mock or remote backend).

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    # Initialise logging before anything else so that the registry can
    # log which backend it selected.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.registry = registry or build_registry(settings)
    app.add_exception_handler(FarmServiceError, service_error_handler)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
