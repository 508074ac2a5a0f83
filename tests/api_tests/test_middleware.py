"""Tests for the HTTP pipeline: middleware, static files and error translation."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from api.middleware import hsts_header_value
from application.settings import Settings
from integration.repositories import InMemoryDataStore
from main import create_app
from tests.fixtures.factories import CompanyFactory, seed
from tests.fixtures.repositories import FailingSaveRepositoryManager


@pytest.fixture
def production_settings() -> Settings:
    return Settings(environment="production", enable_https_redirection=True, log_level="WARNING", debug=False, hsts_include_subdomains=True)


class TestTransportSecurity:
    def test_http_request_is_redirected_to_https(self, production_settings: Settings) -> None:
        client = TestClient(create_app(production_settings))

        response = client.get("/api/companies", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"].startswith("https://testserver/api/companies")

    def test_forwarded_proto_https_is_not_redirected(self, production_settings: Settings) -> None:
        client = TestClient(create_app(production_settings))

        response = client.get("/api/companies", headers={"X-Forwarded-Proto": "https"}, follow_redirects=False)

        assert response.status_code == 200

    def test_hsts_header_on_https_outside_development(self, production_settings: Settings) -> None:
        client = TestClient(create_app(production_settings), base_url="https://testserver")

        response = client.get("/api/companies")

        assert response.status_code == 200
        assert response.headers["strict-transport-security"] == "max-age=2592000; includeSubDomains"

    def test_no_hsts_header_in_development(self, settings: Settings) -> None:
        client = TestClient(create_app(settings), base_url="https://testserver")

        response = client.get("/api/companies")

        assert "strict-transport-security" not in response.headers

    def test_hsts_header_value(self) -> None:
        assert hsts_header_value(Settings(hsts_max_age=60)) == "max-age=60"


class TestCors:
    def test_cross_origin_request_is_allowed_and_location_exposed(self, client: TestClient) -> None:
        response = client.get("/api/companies", headers={"Origin": "https://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"
        assert "Location" in response.headers["access-control-expose-headers"]

    def test_preflight_request(self, client: TestClient) -> None:
        response = client.options(
            "/api/companies",
            headers={"Origin": "https://example.com", "Access-Control-Request-Method": "POST"},
        )

        assert response.status_code == 200
        assert "POST" in response.headers["access-control-allow-methods"]


class TestStaticFiles:
    def test_robots_txt_is_served(self, client: TestClient) -> None:
        response = client.get("/static/robots.txt")

        assert response.status_code == 200
        assert "Disallow: /api/" in response.text

    def test_missing_static_dir_is_skipped(self, settings: Settings, tmp_path) -> None:
        settings.static_files_dir = str(tmp_path / "missing")
        client = TestClient(create_app(settings))

        assert client.get("/static/robots.txt").status_code == 404


class TestErrorTranslation:
    def test_listener_failure_returns_500_with_failures(self, settings: Settings) -> None:
        store = InMemoryDataStore()
        company = CompanyFactory.create()
        seed(store, company)
        client = TestClient(create_app(settings, FailingSaveRepositoryManager(store)))

        response = client.delete(f"/api/companies/{company.id}")

        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Notification Listener Failure"
        assert [failure["listener"] for failure in body["failures"]] == ["DeleteCompanyHandler"]
        assert "disk full" in body["failures"][0]["error"]

    def test_unexpected_error_returns_generic_500(self, settings: Settings) -> None:
        client = TestClient(create_app(settings, FailingSaveRepositoryManager()), raise_server_exceptions=False)

        response = client.post("/api/companies", json={"name": "Acme", "address": "1 Main St"})

        assert response.status_code == 500
        assert "disk full" not in response.text

    def test_unexpected_error_response_carries_cors_headers(self, settings: Settings) -> None:
        client = TestClient(create_app(settings, FailingSaveRepositoryManager()), raise_server_exceptions=False)

        response = client.post("/api/companies", json={"name": "Acme", "address": "1 Main St"}, headers={"Origin": "https://example.com"})

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.json()["title"] == "Internal Server Error"

    def test_not_found_uses_problem_shape(self, client: TestClient) -> None:
        response = client.get(f"/api/companies/{uuid4()}")

        assert set(response.json()) == {"title", "status", "detail"}
