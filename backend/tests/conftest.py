import os

# Configure settings before importing app modules.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("AWS_REGION", "us-east-1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.v1.deps import get_summarizer
from app.core.security import create_access_token
from app.db.database import Base, enable_sqlite_foreign_keys, get_db
from app.db.models import User
from app.main import app
from app.utils.exceptions import SummarizationError


class FakeSummarizer:
    """Stands in for SummarizationService; records every call."""

    model_id = "fake-model"

    def __init__(self):
        self.calls = []
        self.result = "A concise summary."
        self.error = None

    def summarize(self, content: str) -> str:
        self.calls.append(content)
        if self.error is not None:
            raise self.error
        return self.result

    def fail_with(self, message: str = "model unavailable"):
        self.error = SummarizationError(message)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(eng, "connect", enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def alice(db_session):
    user = User(id="user-alice", name="Alice", email="alice@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def bob(db_session):
    user = User(id="user-bob", name="Bob", email="bob@example.com")
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def client(session_factory, summarizer):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_summarizer] = lambda: summarizer
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _make(user_id: str, **claims) -> dict:
        token = create_access_token({"sub": user_id, **claims})
        return {"Authorization": f"Bearer {token}"}
    return _make
