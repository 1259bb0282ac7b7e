"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import sessionmaker

from tinylink.database import Base, create_db_engine, get_db
from tinylink.main import app as tinylink_app
from tinylink.services.store import LinkStore


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite engine so concurrent requests share one database."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(db):
    return LinkStore(db)


@pytest.fixture
def app(session_factory):
    """App with get_db pointed at the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    tinylink_app.dependency_overrides[get_db] = override_get_db
    yield tinylink_app
    tinylink_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
