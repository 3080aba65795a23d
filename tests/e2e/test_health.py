"""End-to-end tests for the health endpoint."""

import pytest

from tests.harness import create_client_fixture

client = create_client_fixture()


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        http, _ = client

        response = await http.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "0.1.0"
        assert body["identity_provider"] is True
        assert body["database"] is True
        assert body["email_delivery"] is True
        assert "timestamp" in body

    @pytest.mark.asyncio
    async def test_cors_preflight(self, client):
        http, _ = client

        response = await http.options(
            "/api/send-verification-email",
            headers={
                "Origin": "https://app.uniflow.app",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers
