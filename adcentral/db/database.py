"""
Database connection and session management with SQLAlchemy
Async engine creates the schema at startup, sync sessions back the record store
"""
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy import create_engine, Engine, text
from sqlalchemy.orm import sessionmaker, Session
from adcentral.core.config import settings
from adcentral.models import Base
from adcentral.db.record_store import RecordStore
from os import (
    makedirs,
    path,
    open,
)

logger = logging.getLogger(__name__)


def setup_app_database_url(env_var_value: Optional[str], default_filename: str) -> str:
    """Setup app database URL with SQLite fallback if env var is None"""
    if env_var_value is None:
        # Create data directory if it doesn't exist
        makedirs("data", exist_ok=True)

        # Create async SQLite database path
        db_path = f"sqlite+aiosqlite:///./data/{default_filename}"

        # Create empty file if it doesn't exist
        file_path = f"data/{default_filename}"
        if not path.exists(file_path):
            open(file_path, 'a').close()

        logger.info("Using SQLite database %s", db_path)
        return db_path

    return env_var_value

def create_async_database_engine(database_url: str) -> AsyncEngine:
    """Create async SQLAlchemy engine"""
    return create_async_engine(database_url, echo=False)

def to_sync_database_url(database_url: str) -> str:
    """Convert an async driver URL to its sync counterpart"""
    if database_url.startswith("sqlite+aiosqlite://"):
        return database_url.replace("sqlite+aiosqlite://", "sqlite://", 1)
    return database_url

def create_sync_database_engine(database_url: str) -> Engine:
    """Create sync SQLAlchemy engine"""
    return create_engine(to_sync_database_url(database_url), echo=False)

def create_sync_session_factory(engine: Engine):
    """Create sync sessionmaker for given engine"""
    return sessionmaker(
        bind=engine,
        class_=Session,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )

# Setup app database URL
APP_DATABASE_URL = setup_app_database_url(settings.APP_DATABASE_URL, "db.sqlite3")

# Update settings with resolved URL
settings.APP_DATABASE_URL = APP_DATABASE_URL

# Async engine for schema creation, sync engine for request handling
app_engine = create_async_database_engine(APP_DATABASE_URL)
app_sync_engine = create_sync_database_engine(APP_DATABASE_URL)
AppSyncSessionLocal = create_sync_session_factory(app_sync_engine)

# Register tables with Base.metadata
from adcentral.models import client, campaign, roi_calculation  # noqa: E402,F401

async def create_app_tables():
    """Create app database tables"""
    async with app_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("App database tables created: %s", ", ".join(Base.metadata.tables))

def check_database_connection() -> bool:
    """Return True when the app database answers a trivial query"""
    try:
        with AppSyncSessionLocal() as session:
            session.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        return False

_record_store = RecordStore(AppSyncSessionLocal)

def get_record_store() -> RecordStore:
    """Dependency returning the app record store"""
    return _record_store
