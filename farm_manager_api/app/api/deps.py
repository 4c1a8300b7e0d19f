"""FastAPI dependencies shared by all routers."""

from fastapi import Request

from farm_manager_api.app.services.registry import ServiceRegistry


def get_registry(request: Request) -> ServiceRegistry:
    """Return the service registry attached to the application."""
    return request.app.state.registry
