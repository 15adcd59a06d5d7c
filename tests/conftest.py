import pytest
from httpx import ASGITransport, AsyncClient

from posts_api.main import create_app
from posts_api.storage.memory import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """Fresh store holding the three seed posts."""
    return InMemoryStore.seeded()


@pytest.fixture
async def client(store: InMemoryStore):
    """Create test client bound to its own app and store."""
    app = create_app(store)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
