# tests/conftest.py

import os

# Settings are read at import time, so the environment must be ready first.
# Always a throwaway SQLite file: the suite drops this database when done.
os.environ["DATABASE_URL"] = "sqlite:///./eventgraph_test.db"
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-123")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from starlette.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy_utils import create_database, database_exists, drop_database

from eventgraph.main import app
from eventgraph.db.session import get_db
from eventgraph.db.base_class import Base
from eventgraph.core.config import settings
import eventgraph.models  # noqa: F401


# --- Test Database Setup ---
TEST_DATABASE_URL = settings.DATABASE_URL
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    if database_exists(engine.url):
        drop_database(engine.url)
    create_database(engine.url)
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()
    drop_database(engine.url)


@pytest.fixture(scope="function")
def db_session():
    session = TestingSessionLocal()
    yield session
    session.close()
    # Every test starts from empty tables
    with engine.begin() as connection:
        for table in reversed(Base.metadata.sorted_tables):
            connection.execute(table.delete())


# --- Test Client Fixtures ---
@pytest.fixture(scope="function")
def client(db_session):
    """
    Provides a TestClient whose requests each get their own session on the
    test database, like they would in production.
    """

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
