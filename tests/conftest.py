"""Pytest bootstrap: project imports, an in-memory database and an HTTP client."""

from pathlib import Path
import sys

# Ensure project root is on sys.path so `import skillswap` works without install
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skillswap import models  # noqa: F401 - register tables on Base.metadata
from skillswap.database import Base


@pytest.fixture
def db_session():
    # StaticPool keeps one connection so the app thread sees the same in-memory DB.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def session_store():
    from skillswap.utils.session_store import InMemorySessionStore

    return InMemorySessionStore()


@pytest.fixture
def make_client(db_session, session_store):
    """Factory for TestClients sharing the test database and session store."""
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from skillswap.config import settings
    from skillswap.database import get_db
    from skillswap.main import app
    from skillswap.utils.security import encode_session_cookie
    from skillswap.utils.session_store import get_session_store, new_session_token

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_store] = lambda: session_store

    def _make(user=None, **kwargs) -> TestClient:
        client = TestClient(app, **kwargs)
        if user is not None:
            token = new_session_token()
            session_store.set(token, user.id)
            client.cookies.set(settings.SESSION_COOKIE_NAME, encode_session_cookie(token))
        return client

    yield _make
    app.dependency_overrides.clear()
