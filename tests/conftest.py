import httpx
import pytest
from httpx import ASGITransport

from hotel_booking.services.database import HotelRepository, create_db_engine


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'test.sqlite'}"


@pytest.fixture
def mock_env(monkeypatch, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("SEED_SAMPLE_DATA", "true")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
def repository(database_url):
    repo = HotelRepository(create_db_engine(database_url))
    repo.init()
    repo.seed_sample_data()
    yield repo
    repo.dispose()


@pytest.fixture
async def client(mock_env):
    from hotel_booking.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def unraised_client(mock_env):
    """Client that returns the app's 500 response instead of re-raising the error."""
    from hotel_booking.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            yield c
