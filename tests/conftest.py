# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lugyi_admin.db.base import Base
from lugyi_admin.db.database import get_db
from lugyi_admin.main import app
from lugyi_admin.services.database_service import DatabaseService


@pytest.fixture
def session():
    """
    A session on a fresh in-memory SQLite database for EACH test. StaticPool
    keeps the single connection alive so the app and the test see the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def db_service(session):
    return DatabaseService(db_session=session)


@pytest.fixture
def client(session):
    """A TestClient whose requests run against the test session."""
    app.dependency_overrides[get_db] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
