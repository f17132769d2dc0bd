import pytest
from httpx import ASGITransport, AsyncClient

from app.database import Database
from app.main import create_app

@pytest.fixture
def anyio_backend():
    return "asyncio"

@pytest.fixture
def database_url(tmp_path):
    # file backed so concurrent requests get their own connections
    return f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}"

@pytest.fixture
async def database(database_url):
    db = Database(database_url)
    await db.create_tables()
    yield db
    await db.dispose()

@pytest.fixture
def app(database):
    return create_app(database)

@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

@pytest.fixture
def create(client):
    async def _create(text):
        res = await client.post("/todos", json={"text": text})
        assert res.status_code == 201
        return res.json()
    return _create
