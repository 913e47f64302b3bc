import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("FEATURES", '{"tour-ratings": true}')
    monkeypatch.setenv("TOUR_IDS", "[1, 999]")
    monkeypatch.setenv("CUSTOMER_IDS", "[10, 11, 12, 1000, 1001]")


@pytest.fixture
def ratings_disabled(monkeypatch, mock_env):
    monkeypatch.setenv("FEATURES", '{"tour-ratings": false}')


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def disabled_client(ratings_disabled):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
