"""Shared test fixtures and configuration."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from event_checkin.api.deps import get_store
from event_checkin.core.utils import today
from event_checkin.db import Base, make_session_factory
from event_checkin.main import app
from event_checkin.schemas import EventCreate
from event_checkin.storage import DatabaseStore, MemoryStore


# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(autouse=True)
def disable_rate_limiting_for_tests():
    """Switch slowapi off so bursts of test requests are never throttled."""
    from event_checkin.core.rate_limit import limiter

    enabled = limiter.enabled
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = enabled


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh database for each test."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def db_store(db_engine):
    return DatabaseStore(make_session_factory(db_engine))


@pytest.fixture(params=["memory", "database"])
def store(request):
    """Every store-backed test runs once per backend."""
    if request.param == "memory":
        return request.getfixturevalue("memory_store")
    return request.getfixturevalue("db_store")


@pytest.fixture
def event_factory(store):
    """Create events directly through the store (no date validation)."""
    def _create(name="Quarterly All-Hands", date=None, **kwargs):
        data = EventCreate(name=name, date=date or today(), **kwargs)
        return store.create_event(data)
    return _create


@pytest.fixture(scope="function")
def client(store):
    """Create a test client backed by the parametrized store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
