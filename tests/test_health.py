"""Tests for health endpoints and app wiring."""

from httpx import ASGITransport, AsyncClient

from posts_api.main import app, create_app
from posts_api.storage.memory import InMemoryStore


async def test_liveness(client: AsyncClient):
    response = await client.get("/healthz/live")
    assert response.status_code == 200
    assert response.json() == {"status": "live"}


async def test_readiness_reports_post_count(client: AsyncClient):
    response = await client.get("/healthz/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "posts": 3}


async def test_apps_do_not_share_stores():
    first, second = create_app(InMemoryStore.seeded()), create_app(InMemoryStore())
    async with AsyncClient(transport=ASGITransport(app=first), base_url="http://test") as a, \
            AsyncClient(transport=ASGITransport(app=second), base_url="http://test") as b:
        await a.post("/api/posts", json={"title": "only in first"})
        assert len((await a.get("/api/posts")).json()) == 4
        assert (await b.get("/api/posts")).json() == []


def test_module_app_is_wired():
    assert isinstance(app.state.store, InMemoryStore)
    assert app.url_path_for("list_posts") == "/api/posts"
