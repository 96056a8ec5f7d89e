"""
Shared fixtures: a fresh SQLite database per test and an API client bound to it.
"""

import uuid
import pytest
from fastapi.testclient import TestClient

from learnpersona.api.app import app
from learnpersona.api.public import get_db_session
from learnpersona.ingest.accounts import create_user
from learnpersona.ingest.database import init_database, get_session
from learnpersona.ingest.schema import ROLE_LD_PROFESSIONAL
from learnpersona.ingest.seed import seed_catalog


FIXTURE_PASSWORD = "secret123"


@pytest.fixture(scope="function")
def engine(tmp_path):
    """Fresh database for each test."""
    return init_database(f"sqlite:///{tmp_path / 'learnpersona_test.db'}")


@pytest.fixture(scope="function")
def session(engine):
    """Get database session."""
    sess = get_session(engine)
    yield sess
    sess.close()


@pytest.fixture
def catalog(session):
    """Seed the sample course catalog and strategies."""
    seed_catalog(session)
    return session


@pytest.fixture
def test_user(session):
    """Create a learner."""
    suffix = uuid.uuid4().hex[:8]
    return create_user(
        session,
        username=f"learner_{suffix}",
        password=FIXTURE_PASSWORD,
        name="Test Learner",
        email=f"learner_{suffix}@example.com",
        department="Engineering"
    )


@pytest.fixture
def ld_user(session):
    """Create an L&D professional."""
    suffix = uuid.uuid4().hex[:8]
    return create_user(
        session,
        username=f"ld_{suffix}",
        password=FIXTURE_PASSWORD,
        name="Test L&D",
        email=f"ld_{suffix}@example.com",
        department="HR",
        role=ROLE_LD_PROFESSIONAL
    )


@pytest.fixture
def client(engine):
    """FastAPI test client using the test database."""
    def override_session():
        sess = get_session(engine)
        try:
            yield sess
        finally:
            sess.close()

    app.dependency_overrides[get_db_session] = override_session
    yield TestClient(app)
    app.dependency_overrides.clear()
