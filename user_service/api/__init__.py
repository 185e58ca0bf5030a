"""
API package.

Builds the application router from the route table, binding each route
descriptor to the endpoint registered under its operation id.
"""

from collections.abc import Callable, Mapping
from typing import Any, Optional

from fastapi import APIRouter

from user_service.api.endpoints import ENDPOINTS
from user_service.api.route_table import RouteTable


def build_api_router(
    route_table: RouteTable,
    endpoints: Optional[Mapping[str, Callable[..., Any]]] = None,
) -> APIRouter:
    """
    Create a router serving every route in the table.

    Args:
        route_table: Routes to register.
        endpoints: Operation id to endpoint mapping. Defaults to ENDPOINTS.

    Returns:
        Configured APIRouter.

    Raises:
        KeyError: If a route has no endpoint for its operation id.
    """
    endpoints = ENDPOINTS if endpoints is None else endpoints
    router = APIRouter()
    for route in route_table:
        if route.operation_id not in endpoints:
            raise KeyError(f"No endpoint registered for operation '{route.operation_id}'")
        router.add_api_route(
            route.path,
            endpoints[route.operation_id],
            methods=[route.method],
            name=route.operation_id,
            summary=route.summary,
            tags=list(route.tags),
        )
    return router


__all__ = ["build_api_router"]
