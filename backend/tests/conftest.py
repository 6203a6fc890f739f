"""
Pytest configuration and shared fixtures.

This module provides common fixtures for all test modules: an in-memory
SQLite database per test, a session bound to it, and a TestClient whose
database dependency points at the same database.
"""

import pytest
from datetime import date
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import get_db, init_db
from app.main import app
from app.models.person import Person


@pytest.fixture
def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Database session for service tests."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """Test client with the database dependency overridden."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def grace(db_session) -> Person:
    """A person with no duties yet."""
    person = Person(name="Grace")
    db_session.add(person)
    db_session.commit()
    return person


@pytest.fixture
def first_duty_date() -> date:
    return date(2024, 1, 10)


@pytest.fixture
def mock_db_session():
    """Mock database session for audit tests."""
    session = Mock()
    session.add = Mock()
    session.commit = Mock()
    session.rollback = Mock()
    return session
