import os

# In-memory SQLite, no real LLM: must be set before ia_console.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("AI_INTEGRATIONS_OPENAI_API_KEY", None)
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from ia_console.database import Base, SessionLocal, engine
from ia_console.main import app
from ia_console.models.offense import Offense  # noqa: F401
from ia_console.models.log_record import LogRecord  # noqa: F401
from ia_console.dao.offense_dao import seed_once


@pytest.fixture
def db():
    """Fresh schema + seeded catalog for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    seed_once(session)
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def catalog(db):
    return db.query(Offense).order_by(Offense.id).all()
