"""
API reference rendering.

Builds an OpenAPI 3.1 document from the route table and embeds it in an HTML
page that loads the Scalar API reference viewer from a CDN.
"""

import html
import json
import logging
from string import Template
from typing import Any, Optional

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse

from user_service.api.route_table import RouteTable
from user_service.core.config import DocsConfig

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.1.0"

REFERENCE_PAGE = Template(
    """<!doctype html>
<html>
<head>
    <title>$title</title>
    <meta charset="utf-8"/>
    <meta
            name="viewport"
            content="width=device-width, initial-scale=1"/>
</head>
<body>

<script
        id="api-reference"
        data-configuration="$configuration"
        type="application/json">
    $document
</script>
<script src="$cdn_url"></script>
</body>
</html>
"""
)


def build_api_document(
    route_table: RouteTable,
    title: str,
    version: str,
    description: Optional[str] = None,
) -> dict[str, Any]:
    """
    Build the OpenAPI document describing every route in the table.

    Args:
        route_table: Routes to describe.
        title: API title.
        version: API version string.
        description: Optional API description.

    Returns:
        JSON-serializable OpenAPI document.
    """
    info: dict[str, Any] = {"title": title, "version": version}
    if description:
        info["description"] = description

    paths: dict[str, dict[str, Any]] = {}
    for route in route_table:
        operation: dict[str, Any] = {
            "summary": route.summary,
            "operationId": route.operation_id,
        }
        if route.tags:
            operation["tags"] = list(route.tags)
        if route.parameters:
            operation["parameters"] = [p.to_openapi() for p in route.parameters]
        operation["responses"] = {
            str(r.status_code): r.to_openapi() for r in route.responses
        }
        paths.setdefault(route.doc_path, {})[route.method.lower()] = operation

    document: dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "paths": paths,
    }
    schemas = route_table.schemas()
    if schemas:
        document["components"] = {
            "schemas": {name: schema.to_openapi() for name, schema in schemas.items()}
        }
    return document


def render_reference_page(document: dict[str, Any], docs_config: DocsConfig) -> str:
    """
    Render the HTML API reference page.

    The document is embedded as JSON inside the ``api-reference`` script
    element. Every ``<`` is written as ``\\u003c`` so the payload can neither
    close the element nor open an HTML comment inside it.
    """
    payload = json.dumps(document, indent=2).replace("<", "\\u003c")
    configuration = json.dumps({"theme": docs_config.theme})
    return REFERENCE_PAGE.substitute(
        title=html.escape(docs_config.title),
        configuration=html.escape(configuration, quote=True),
        document=payload,
        cdn_url=html.escape(docs_config.cdn_url, quote=True),
    )


def build_docs_router(
    document: dict[str, Any],
    docs_config: DocsConfig,
    page: Optional[str] = None,
) -> APIRouter:
    """
    Create the router serving the reference page and the raw document.

    Args:
        document: OpenAPI document to serve.
        docs_config: Paths, theme and viewer URL.
        page: Pre-rendered reference page; rendered from ``document`` if None.

    Returns:
        Router with the page at ``docs_config.path`` and the JSON document at
        ``docs_config.openapi_path``.
    """
    router = APIRouter(tags=["Docs"])
    reference_page = page if page is not None else render_reference_page(document, docs_config)

    @router.get(docs_config.path, response_class=HTMLResponse, include_in_schema=False)
    async def api_reference() -> HTMLResponse:
        return HTMLResponse(reference_page)

    @router.get(docs_config.openapi_path, include_in_schema=False)
    async def api_document() -> JSONResponse:
        return JSONResponse(document)

    logger.debug(
        "API reference routes: %s, %s", docs_config.path, docs_config.openapi_path
    )
    return router
