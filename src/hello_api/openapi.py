"""
API documentation metadata.

The bearer scheme is declared for documentation only; no route enforces it.
"""

from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

TITLE = "API Title"
DESCRIPTION = "Api Description"
VERSION = "1.0"
TAGS = [{"name": "APIS"}]

BEARER_SCHEME = {
    "type": "http",
    "scheme": "bearer",
    "bearerFormat": "JWT",
}


def build_openapi_schema(app: FastAPI, server_url: str) -> Dict[str, Any]:
    """Generate the OpenAPI document once and cache it on the app."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=TITLE,
        version=VERSION,
        description=DESCRIPTION,
        routes=app.routes,
        tags=TAGS,
        servers=[{"url": server_url}],
    )
    components = schema.setdefault("components", {})
    components.setdefault("securitySchemes", {})["bearer"] = dict(BEARER_SCHEME)

    app.openapi_schema = schema
    return schema


def install_openapi(app: FastAPI, server_url: str) -> None:
    """Replace the app's schema generator with one carrying our metadata."""

    def custom_openapi() -> Dict[str, Any]:
        return build_openapi_schema(app, server_url)

    app.openapi = custom_openapi
