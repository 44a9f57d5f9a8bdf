import os
import tempfile

# Point the app at a throwaway database before core.config is imported
_tmpdir = tempfile.mkdtemp(prefix="waitlist-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"
os.environ["WAITLIST_PROJECT_NAME"] = "test-project"
os.environ["WAITLIST_VERIFY_MX"] = "0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import Base, SessionLocal
from core.waitlist_store import StoredEntry, get_waitlist_store
from main import app
from models.waitlist import WaitlistSignup


class FakeStore:
    """In-memory store; set `error` to make create() raise."""

    def __init__(self):
        self.entries = []
        self.error = None

    def create(self, entry):
        if self.error is not None:
            raise self.error
        stored = StoredEntry(id=len(self.entries) + 1, **entry.model_dump())
        self.entries.append(stored)
        return stored


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    db = SessionLocal()
    try:
        db.query(WaitlistSignup).delete()
        db.commit()
    finally:
        db.close()


@pytest.fixture
def fake_store():
    store = FakeStore()
    app.dependency_overrides[get_waitlist_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_waitlist_store, None)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
