"""
Application-level behaviour: the endpoint descriptor, health check,
catch-all 404, error normalisation and response headers.
"""
import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError

from news_api.endpoints import ENDPOINTS
from news_api.services import article_service


# ---------------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_endpoints(async_client: AsyncClient):
    resp = await async_client.get("/api")
    assert resp.status_code == 200
    assert resp.json() == {"endpoints": ENDPOINTS}


@pytest.mark.asyncio
async def test_endpoints_describe_every_api_route(app):
    """Every /api route registered on the app has a descriptor entry."""
    described = set(ENDPOINTS)
    for route in app.routes:
        path = getattr(route, "path", "")
        if not path.startswith("/api"):
            continue
        express_path = path.replace("{", ":").replace("}", "")
        for method in route.methods - {"HEAD"}:
            assert f"{method} {express_path}" in described


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_response_time_header(async_client: AsyncClient):
    resp = await async_client.get("/api/topics")
    assert "x-response-time-ms" in resp.headers
    assert float(resp.headers["x-response-time-ms"]) >= 0


@pytest.mark.asyncio
async def test_cors_no_credentials_with_wildcard_origin(async_client: AsyncClient):
    resp = await async_client.options(
        "/api/articles",
        headers={
            "Origin": "https://example.com",
            "Access-Control-Request-Method": "GET",
        },
    )
    cred_header = resp.headers.get("access-control-allow-credentials", "").lower()
    assert cred_header != "true"


# ---------------------------------------------------------------------------
# Error normalisation
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/nonsense", "/not-an-api", "/api/articles/1/votes"])
async def test_unmatched_path(async_client: AsyncClient, path):
    resp = await async_client.get(path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "path not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method, path", [
    ("DELETE", "/api/topics"),
    ("PUT", "/api/articles/1"),
    ("POST", "/api/users"),
])
async def test_unmatched_method(async_client: AsyncClient, method, path):
    """Only exact method and path pairs are routed."""
    resp = await async_client.request(method, path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "path not found"}


@pytest.mark.asyncio
async def test_database_failure_returns_500(async_client: AsyncClient, monkeypatch):
    """Store errors other than bad input become a generic 500."""
    async def unavailable(db, topic=None):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(article_service, "get_articles", unavailable)

    resp = await async_client.get("/api/articles")
    assert resp.status_code == 500
    assert resp.json() == {"msg": "internal server error"}


@pytest.mark.asyncio
async def test_unexpected_error_returns_500(app, monkeypatch):
    """Unexpected exceptions never leak details into the body."""
    async def broken(db, topic=None):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(article_service, "get_articles", broken)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/api/articles")
    assert resp.status_code == 500
    assert resp.json() == {"msg": "internal server error"}
    assert "secret" not in resp.text
