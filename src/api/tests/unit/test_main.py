"""Unit tests for main FastAPI application configuration."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient


class TestApplication:
    """Tests for the assembled application."""

    def test_health_returns_ok(self) -> None:
        """Health endpoint responds without touching the database."""
        from main import app

        client = TestClient(app)
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok"}

    def test_key_listing_and_rpc_routes_are_mounted(self) -> None:
        from main import app

        paths = {route.path for route in app.routes}

        assert "/v1/apis/{api_id}/keys" in paths
        assert "/rpc/rbac.updatePermission" in paths

    def test_app_title_and_version(self) -> None:
        from infrastructure.version import __version__
        from main import app

        assert app.title == "Latchkey API"
        assert app.version == __version__
