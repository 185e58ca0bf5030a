"""
FastAPI Application Entry Point.

User account lookup service with a browsable API reference.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from user_service.api import build_api_router
from user_service.api.docs import build_docs_router
from user_service.core.container import Container, get_container

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    The route table is built once and passed to both the API router and the
    documentation router. FastAPI's generated docs are disabled in favour of
    the reference page rendered from that table.

    Args:
        container: Container to take settings and route metadata from.
            Defaults to the cached global container.

    Returns:
        Configured FastAPI application instance.
    """
    container = container if container is not None else get_container()
    settings = container.settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Handles startup and shutdown events of the container.
        """
        await container.startup()
        yield
        await container.shutdown()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    register_routes(app, container)

    return app


def register_routes(app: FastAPI, container: Container) -> None:
    """
    Register all application routes.

    Args:
        app: FastAPI application instance.
        container: Source of the route table and rendered documentation.
    """
    route_table = container.route_table
    app.include_router(build_api_router(route_table))

    docs = container.settings.docs
    app.include_router(
        build_docs_router(container.api_document, docs, page=container.reference_page)
    )

    logger.info(
        "Registered %d API routes; API reference mounted at %s",
        len(route_table),
        docs.path,
    )


def run() -> None:
    """
    Serve the application with uvicorn.

    Binds to the configured host and port; uvicorn exits the process if the
    address cannot be bound.
    """
    server = get_container().settings.server
    uvicorn.run(
        app,
        host=server.host,
        port=server.port,
        log_level=server.log_level,
    )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    run()
