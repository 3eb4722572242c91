# tests/test_services/test_library_service.py
import pytest
from core.errors import NotFound
from core.services import AuthorService, LibraryService, StoryService, VolumeService

@pytest.fixture
def library_service(db_session):
    return LibraryService(db_session)

@pytest.fixture
def populated(db_session, sample_library, other_library, sample_author, sample_story, sample_volume, sample_series):
    """Records in both libraries with the same names"""
    AuthorService(db_session).insert({"first_name": "Barney", "last_name": "Rubble", "library_id": other_library.id})
    AuthorService(db_session).insert({"first_name": "Fred", "last_name": "Flintstone", "library_id": sample_library.id})
    StoryService(db_session).insert({"library_id": other_library.id, "name": "Quarry Days"})
    VolumeService(db_session).insert({"library_id": other_library.id, "name": "Quarry Days", "media": "Kindle"})

def test_children_stay_within_library(library_service, populated, sample_library, other_library):
    authors = library_service.authors_all(sample_library.id)
    assert [(a.first_name, a.last_name) for a in authors] == [("Fred", "Flintstone"), ("Barney", "Rubble")]
    assert all(author.library_id == sample_library.id for author in authors)

    assert len(library_service.authors_all(other_library.id)) == 1
    assert [s.name for s in library_service.series_all(sample_library.id)] == ["Bedrock Chronicles"]
    assert library_service.series_all(other_library.id) == []
    assert [s.name for s in library_service.stories_all(other_library.id)] == ["Quarry Days"]
    assert [v.media for v in library_service.volumes_all(other_library.id)] == ["Kindle"]

def test_children_exact_is_scoped(library_service, populated, sample_library, other_library, sample_author):
    assert library_service.authors_exact(sample_library.id, "Barney", "Rubble").id == sample_author.id
    other = library_service.authors_exact(other_library.id, "Barney", "Rubble")
    assert other.id != sample_author.id

    with pytest.raises(NotFound) as e:
        library_service.authors_exact(other_library.id, "Fred", "Flintstone")
    assert e.value.message == "name: Missing Author 'Fred Flintstone'"

    assert library_service.volumes_exact(sample_library.id, "Quarry Days").media == "Book"
    assert library_service.stories_exact(other_library.id, "Quarry Days").library_id == other_library.id
    with pytest.raises(NotFound):
        library_service.series_exact(other_library.id, "Bedrock Chronicles")

def test_children_name_search(library_service, populated, sample_library):
    assert [a.last_name for a in library_service.authors_name(sample_library.id, "flint")] == ["Flintstone"]
    assert [s.name for s in library_service.series_name(sample_library.id, "ROCK")] == ["Bedrock Chronicles"]
    assert [s.name for s in library_service.stories_name(sample_library.id, "quarry")] == ["Quarry Days"]
    assert library_service.volumes_name(sample_library.id, "nothing") == []

def test_children_pagination(library_service, populated, sample_library):
    assert [a.first_name for a in library_service.authors_all(sample_library.id, {"limit": "1"})] == ["Fred"]
    assert [a.first_name for a in library_service.authors_all(sample_library.id, {"offset": "1"})] == ["Barney"]

@pytest.mark.parametrize("lookup, args", [
    ("authors_all", ()),
    ("authors_exact", ("Barney", "Rubble")),
    ("series_name", ("x",)),
    ("stories_all", ()),
    ("volumes_exact", ("Quarry Days",)),
])
def test_missing_library(library_service, lookup, args):
    with pytest.raises(NotFound) as e:
        getattr(library_service, lookup)(9999, *args)
    assert e.value.message == "library_id: Missing Library 9999"
