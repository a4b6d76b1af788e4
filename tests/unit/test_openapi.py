"""Tests for the published API documentation metadata."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hello_api import openapi
from hello_api.app import app


@pytest.fixture
def schema():
    return TestClient(app).get("/openapi.json").json()


class TestDocumentMetadata:
    def test_info_block(self, schema):
        assert schema["info"]["title"] == "API Title"
        assert schema["info"]["description"] == "Api Description"
        assert schema["info"]["version"] == "1.0"

    def test_declares_apis_tag(self, schema):
        assert {"name": "APIS"} in schema["tags"]

    def test_default_server_url(self, schema):
        assert schema["servers"] == [{"url": "http://localhost:4000"}]

    def test_declares_bearer_scheme(self, schema):
        bearer = schema["components"]["securitySchemes"]["bearer"]

        assert bearer == {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}

    def test_no_route_requires_a_token(self, schema):
        for path_item in schema["paths"].values():
            for operation in path_item.values():
                assert "security" not in operation

    def test_documents_all_routes(self, schema):
        assert set(schema["paths"]["/"]) == {"get"}
        assert set(schema["paths"]["/health"]) == {"get", "post"}


class TestSchemaBuilder:
    def test_schema_is_cached_on_app(self):
        fresh = FastAPI()
        openapi.install_openapi(fresh, "http://example.test")

        first = fresh.openapi()
        assert fresh.openapi() is first

    def test_server_url_is_configurable(self):
        fresh = FastAPI()
        openapi.install_openapi(fresh, "http://example.test:9000")

        assert fresh.openapi()["servers"] == [{"url": "http://example.test:9000"}]

    def test_docs_page_is_served(self):
        response = TestClient(app).get("/docs")

        assert response.status_code == 200
        assert "swagger" in response.text.lower()
