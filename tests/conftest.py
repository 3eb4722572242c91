# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.sa.database import Database
from core.sa.repositories import (
    AuthorRepository, LibraryRepository, SeriesRepository, StoryRepository, VolumeRepository
)

@pytest.fixture
def database_url(tmp_path):
    """Connection string of a fresh SQLite database file for one test"""
    return f"sqlite:///{tmp_path / 'test_bookcase.db'}"

@pytest.fixture
def database(database_url):
    """Create a test database instance with an empty schema"""
    db = Database(database_url)
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def sample_library(db_session):
    """Create a sample library for testing."""
    return LibraryRepository(db_session).insert({
        "name": "Test Library",
        "notes": "Test library notes",
    })

@pytest.fixture
def other_library(db_session):
    """A second library, for checks that records stay within their own library."""
    return LibraryRepository(db_session).insert({"name": "Other Library"})

@pytest.fixture
def sample_author(db_session, sample_library):
    """Create a sample author for testing."""
    return AuthorRepository(db_session).insert({
        "first_name": "Barney",
        "last_name": "Rubble",
        "library_id": sample_library.id,
    })

@pytest.fixture
def sample_series(db_session, sample_library):
    """Create a sample series for testing."""
    return SeriesRepository(db_session).insert({
        "library_id": sample_library.id,
        "name": "Bedrock Chronicles",
    })

@pytest.fixture
def sample_story(db_session, sample_library):
    """Create a sample story for testing."""
    return StoryRepository(db_session).insert({
        "library_id": sample_library.id,
        "name": "Quarry Days",
    })

@pytest.fixture
def sample_volume(db_session, sample_library):
    """Create a sample volume for testing."""
    return VolumeRepository(db_session).insert({
        "library_id": sample_library.id,
        "location": "Box 1",
        "media": "Book",
        "name": "Quarry Days",
        "read": True,
    })
