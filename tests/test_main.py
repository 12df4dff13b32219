import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_root_lists_endpoints(test_client: AsyncClient):
    response = await test_client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert data["endpoints"]["users"] == "/api/users"


@pytest.mark.asyncio
async def test_health_check(test_client: AsyncClient):
    response = await test_client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert data["version"] == "1.0.0"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(test_client: AsyncClient):
    response = await test_client.get("/api/no-existe")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["message"] == "La ruta /api/no-existe no existe"


@pytest.mark.asyncio
async def test_request_id_is_echoed(test_client: AsyncClient):
    response = await test_client.get("/", headers={"X-Request-ID": "abc123"})
    generated = await test_client.get("/")

    assert response.headers["X-Request-ID"] == "abc123"
    assert len(generated.headers["X-Request-ID"]) == 32


@pytest.mark.asyncio
async def test_error_envelope_has_every_key(test_client: AsyncClient):
    response = await test_client.get("/api/users/999")

    body = response.json()
    assert set(body) == {"success", "data", "message", "count", "error"}
    assert body["data"] is None
    assert body["message"] == body["error"]["message"]


@pytest.mark.asyncio
async def test_openapi_documents_error_envelope(test_client: AsyncClient):
    response = await test_client.get("/openapi.json")

    schema = response.json()
    create_user = schema["paths"]["/api/users"]["post"]["responses"]
    assert "409" in create_user
    assert "ErrorResponse" in schema["components"]["schemas"]
