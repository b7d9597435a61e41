"""
Pytest configuration and fixtures.

Database tests run against an in-memory SQLite database created fresh
for each test. The match upsert uses SQLite's ON CONFLICT support, so
the same statements as on PostgreSQL are exercised.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine shared across threads (needed by TestClient)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(sqlite_engine):
    """Session bound to a fresh in-memory database."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)()
    try:
        yield session
    finally:
        session.close()
