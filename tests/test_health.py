"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"
    assert data.get("service")


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """A well-formed X-Request-ID is returned unchanged; a malformed one is replaced."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id\n"})
    assert response.headers["X-Request-ID"] != "bad id\n"
    assert response.headers["X-Request-ID"]


async def test_unknown_route_returns_json_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
