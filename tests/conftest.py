import os
import sys

import pytest
from sqlalchemy.orm import sessionmaker

# Ensure repo root is on sys.path so tests can import the champions package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from champions import create_app  # noqa: E402
from champions.database import RepositoryContainer, build_engine  # noqa: E402
from champions.models import Base  # noqa: E402
from champions.services import ClubService, PlayerService  # noqa: E402

FULL_STATS = {
    "overall": 88,
    "pace": 95,
    "shooting": 79,
    "passing": 74,
    "dribbling": 90,
    "defending": 29,
    "physical": 64,
}


@pytest.fixture
def full_stats():
    return dict(FULL_STATS)


@pytest.fixture
def in_memory_session():
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def repos(in_memory_session):
    return RepositoryContainer(in_memory_session)


@pytest.fixture
def club_service(repos):
    return ClubService(repos)


@pytest.fixture
def player_service(repos):
    return PlayerService(repos)


@pytest.fixture
def app(tmp_path):
    # hermetic file DB per test; the bundled seed stays off unless a test asks for it
    test_config = {
        "DATABASE_URL": f"sqlite:///{tmp_path / 'test_champions.db'}",
        "SEED_DATA": False,
        "TESTING": True,
    }
    app = create_app(test_config)
    app.init_db()
    yield app
    app.extensions["db_engine"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
