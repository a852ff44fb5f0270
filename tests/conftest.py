"""
Shared fixtures: in-memory SQLite record store and an API client wired to it
"""
import os

# Keep the module-level engines off the filesystem
os.environ.setdefault("APP_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from adcentral.db.database import create_sync_session_factory, get_record_store
from adcentral.db.record_store import RecordStore
from adcentral.main import app
from adcentral.models import Base


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):
    return RecordStore(create_sync_session_factory(engine))


@pytest.fixture
def api_client(store):
    """TestClient whose endpoints use the in-memory store"""
    app.dependency_overrides[get_record_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_record(store):
    """An active client"""
    client_id = store.insert("clients", {"name": "Padaria Central", "status": "active"})
    return store.get("clients", client_id)


@pytest.fixture
def campaign_record(store, client_record):
    """An active campaign of client_record"""
    campaign_id = store.insert("campaigns", {
        "client_id": client_record["id"],
        "name": "Summer Launch",
        "objective": "Drive delivery orders",
        "budget": 3000.0,
        "platforms": ["Instagram", "Facebook"],
        "status": "active",
    })
    return store.get("campaigns", campaign_id)


@pytest.fixture
def base_time():
    return datetime(2025, 3, 1, 12, 0, 0)


def history_row(created_at, **overrides):
    """A persisted-shape ROI row with explicit creation time"""
    row = {
        "investment": 20000.0,
        "ticket": 200.0,
        "conversion_rate": 10.0,
        "sales": 10,
        "revenue": 2000.0,
        "roi": -90.0,
        "cac": 2000.0,
        "breakeven": 20000.0 / (200.0 * 0.3),
        "created_at": created_at,
    }
    row.update(overrides)
    return row


@pytest.fixture
def make_history_row():
    return history_row


@pytest.fixture
def minutes():
    return lambda n: timedelta(minutes=n)
