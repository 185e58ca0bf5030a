"""
Dependency Injection Container for the user service.

Provides lazy initialization of shared, read-only resources. The route table
and the rendered API reference are built once per container and shared by the
router and the documentation handler.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from user_service.api.docs import build_api_document, render_reference_page
from user_service.api.route_table import RouteTable, build_route_table
from user_service.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_DESCRIPTION = "User account lookup service."


class Container:
    """
    Dependency Injection Container.

    Manages lifecycle of shared resources:
    - Settings (configuration)
    - Route table (served routes and their documentation metadata)
    - API document (OpenAPI description rendered from the route table)
    - Reference page (HTML embedding the API document)

    Usage:
        container = get_container()
        settings = container.settings
        route_table = container.route_table
        document = container.api_document
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize the container.

        Args:
            settings: Optional settings override. If None, loads from config.
        """
        self._settings = settings
        self._route_table: RouteTable | None = None
        self._api_document: dict[str, Any] | None = None
        self._reference_page: str | None = None

    @property
    def settings(self) -> Settings:
        """
        Get the application settings.

        Returns:
            Cached Settings instance.
        """
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def route_table(self) -> RouteTable:
        """Get the route table, building it on first access."""
        if self._route_table is None:
            self._route_table = build_route_table()
            logger.debug("Built route table with %d routes", len(self._route_table))
        return self._route_table

    @property
    def api_document(self) -> dict[str, Any]:
        """Get the OpenAPI document, rendering it on first access."""
        if self._api_document is None:
            self._api_document = build_api_document(
                self.route_table,
                title=self.settings.docs.title,
                version=self.settings.app_version,
                description=API_DESCRIPTION,
            )
            logger.debug("Rendered API document for %d paths", len(self._api_document["paths"]))
        return self._api_document

    @property
    def reference_page(self) -> str:
        """Get the HTML API reference page, rendering it on first access."""
        if self._reference_page is None:
            self._reference_page = render_reference_page(
                self.api_document, self.settings.docs
            )
        return self._reference_page

    async def startup(self) -> None:
        """
        Initialize resources on application startup.

        Called by FastAPI lifespan context manager.
        Pre-renders the documentation so configuration errors surface early.
        """
        _ = self.settings
        _ = self.reference_page
        logger.info(
            "%s %s ready with %d routes",
            self.settings.app_name,
            self.settings.app_version,
            len(self.route_table),
        )

    async def shutdown(self) -> None:
        """
        Clean up resources on application shutdown.

        Called by FastAPI lifespan context manager. The container only holds
        immutable, request-independent values, so nothing is released.
        """
        logger.info("%s shutting down", self.settings.app_name)


@lru_cache
def get_container() -> Container:
    """
    Get the cached container instance.

    Uses lru_cache to ensure container is a singleton.

    Returns:
        Cached Container instance.
    """
    return Container()


def clear_container_cache() -> None:
    """
    Clear the container cache.

    Useful for testing to reset the container state.
    Also clears the settings cache.
    """
    get_container.cache_clear()
    get_settings.cache_clear()
