"""
Tests for the top-level routes and middleware wiring
"""

from device_capabilities.main import app


def test_root_returns_plain_text(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == "We on hono!"
    assert response.headers["content-type"].startswith("text/plain")


def test_health_reports_environment(client):
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == "test"
    assert data["database"] in ("connected", "disconnected")
    assert "T" in data["timestamp"]


def test_unknown_route_returns_error_envelope(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "Not Found"}}


def test_cors_preflight_allows_configured_origin(client):
    response = client.options(
        "/api/v1/devices",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_rejects_other_origins(client):
    response = client.get("/", headers={"Origin": "http://evil.example"})

    assert "access-control-allow-origin" not in response.headers


def test_requests_are_logged(client, caplog):
    with caplog.at_level("INFO", logger="device_capabilities.api.middleware"):
        client.get("/")

    assert any("GET / - 200" in r.getMessage() for r in caplog.records)


def test_api_routes_are_mounted():
    paths = app.openapi()["paths"]

    assert "/api/v1/devices" in paths
    assert "/api/v1/bands/{band_id}/devices" in paths
    assert "/api/v1/combos/{combo_id}/bands" in paths
    assert "/api/v1/features/{feature_id}/devices" in paths
    assert "/api/v1/providers" in paths
