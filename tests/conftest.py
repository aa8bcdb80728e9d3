"""
Shared test fixtures.

Provides: in-memory SQLite engine and session, a TestClient wired to it,
and a mocked persistence gateway for service unit tests.
"""

import os

# settings 在 import 時就會讀環境變數，要先設好
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(__file__), ".logs"))

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, enable_case_sensitive_like, get_db
from app.main import app
from app.models.course import Course
from app.repositories.course_repository import CourseGateway, CourseRepository


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_case_sensitive_like(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session) -> CourseRepository:
    return CourseRepository(db_session)


@pytest.fixture
def client(engine):
    TestingSession = sessionmaker(autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_gateway():
    return MagicMock(spec=CourseGateway)


@pytest.fixture
def make_course():
    def _make(code="C1", name="Intro", hours=10, price=100):
        return Course(code=code, name=name, hours=hours, price=price)
    return _make
