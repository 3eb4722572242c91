# tests/test_sa/test_repositories/test_joins.py
import pytest
from core.errors import AlreadyAssociated, BadRequest, NotFound
from core.sa.models import AuthorSeries, AuthorStory, SeriesStory
from core.sa.repositories import (
    AUTHORS_SERIES, AUTHORS_STORIES, SERIES_STORIES,
    AuthorRepository, JoinTableManager, SeriesRepository, StoryRepository
)

@pytest.fixture
def authors_stories(db_session):
    return JoinTableManager(db_session, AUTHORS_STORIES)

@pytest.fixture
def other_story(db_session, other_library):
    return StoryRepository(db_session).insert({"library_id": other_library.id, "name": "Elsewhere"})

def test_add_is_visible_from_both_sides(authors_stories, sample_author, sample_story):
    child = authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    assert child.id == sample_story.id

    assert [story.id for story in authors_stories.all(AuthorRepository, sample_author.id)] == [sample_story.id]
    assert [author.id for author in authors_stories.all(StoryRepository, sample_story.id)] == [sample_author.id]

def test_add_twice_is_already_associated(authors_stories, sample_author, sample_story):
    authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    with pytest.raises(AlreadyAssociated) as e:
        authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    assert e.value.message == (
        f"story_id: Story {sample_story.id} is already associated with Author {sample_author.id}"
    )
    # Also refused from the other side
    with pytest.raises(AlreadyAssociated):
        authors_stories.add(StoryRepository, sample_story.id, sample_author.id)

def test_already_associated_is_a_bad_request():
    assert issubclass(AlreadyAssociated, BadRequest)

def test_add_across_libraries(authors_stories, sample_author, sample_library, other_library, other_story):
    with pytest.raises(BadRequest) as e:
        authors_stories.add(AuthorRepository, sample_author.id, other_story.id)
    assert e.value.message == (
        f"library_id: Author {sample_author.id} belongs to Library {sample_library.id} "
        f"but Story {other_story.id} belongs to Library {other_library.id}"
    )
    assert authors_stories.all(AuthorRepository, sample_author.id) == []

def test_add_missing_records(authors_stories, sample_author, sample_story):
    with pytest.raises(NotFound) as e:
        authors_stories.add(AuthorRepository, 9999, sample_story.id)
    assert e.value.message == "author_id: Missing Author 9999"

    with pytest.raises(NotFound) as e:
        authors_stories.add(AuthorRepository, sample_author.id, 9999)
    assert e.value.message == "story_id: Missing Story 9999"

def test_remove(authors_stories, sample_author, sample_story):
    with pytest.raises(BadRequest) as e:
        authors_stories.remove(AuthorRepository, sample_author.id, sample_story.id)
    assert e.value.message == (
        f"story_id: Story {sample_story.id} is not associated with Author {sample_author.id}"
    )

    authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    removed = authors_stories.remove(StoryRepository, sample_story.id, sample_author.id)
    assert removed.id == sample_author.id
    assert authors_stories.all(AuthorRepository, sample_author.id) == []

    # The pair can be associated again after removal
    authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    assert len(authors_stories.all(AuthorRepository, sample_author.id)) == 1

def test_all_requires_parent(authors_stories):
    with pytest.raises(NotFound) as e:
        authors_stories.all(StoryRepository, 9999)
    assert e.value.message == "story_id: Missing Story 9999"

def test_children_exact_and_name(db_session, authors_stories, sample_author, sample_library, sample_story):
    stories = StoryRepository(db_session)
    second = stories.insert({"library_id": sample_library.id, "name": "Quarry Nights"})
    unrelated = stories.insert({"library_id": sample_library.id, "name": "Quarry Mornings"})
    authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    authors_stories.add(AuthorRepository, sample_author.id, second.id)

    assert authors_stories.exact(AuthorRepository, sample_author.id, ("Quarry Nights",)).id == second.id
    with pytest.raises(NotFound) as e:
        authors_stories.exact(AuthorRepository, sample_author.id, (unrelated.name,))
    assert e.value.message == "name: Missing Story 'Quarry Mornings'"

    found = authors_stories.name(AuthorRepository, sample_author.id, "quarry")
    assert [story.name for story in found] == ["Quarry Days", "Quarry Nights"]
    assert [author.last_name for author in
            authors_stories.name(StoryRepository, sample_story.id, "rubble")] == ["Rubble"]

def test_children_pagination(db_session, authors_stories, sample_author, sample_library):
    stories = StoryRepository(db_session)
    for name in ["D", "B", "A", "C"]:
        story = stories.insert({"library_id": sample_library.id, "name": name})
        authors_stories.add(AuthorRepository, sample_author.id, story.id)

    page = authors_stories.all(AuthorRepository, sample_author.id, {"offset": "1", "limit": "2"})
    assert [story.name for story in page] == ["B", "C"]

def test_series_story_ordinal(db_session, sample_series, sample_story):
    series_stories = JoinTableManager(db_session, SERIES_STORIES)
    series_stories.add(SeriesRepository, sample_series.id, sample_story.id, ordinal=3)

    row = db_session.get(SeriesStory, (sample_series.id, sample_story.id))
    assert row.ordinal == 3

def test_authors_series_has_surrogate_key(db_session, sample_author, sample_series):
    authors_series = JoinTableManager(db_session, AUTHORS_SERIES)
    authors_series.add(SeriesRepository, sample_series.id, sample_author.id)

    row = db_session.query(AuthorSeries).one()
    assert row.id is not None
    assert (row.author_id, row.series_id) == (sample_author.id, sample_series.id)
    with pytest.raises(AlreadyAssociated):
        authors_series.add(AuthorRepository, sample_author.id, sample_series.id)

def test_add_rejects_values_outside_the_join_table(db_session, authors_stories, sample_author, sample_story):
    with pytest.raises(BadRequest) as e:
        authors_stories.add(AuthorRepository, sample_author.id, sample_story.id, ordinal=2)
    assert e.value.message == "ordinal: Not a column of authors_stories"
    assert db_session.query(AuthorStory).count() == 0

def test_unique_key_backs_up_duplicate_check(db_session, authors_stories, sample_author, sample_story, monkeypatch):
    authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)

    # Another writer added the same pair between the count and the insert
    monkeypatch.setattr(authors_stories, "_count", lambda keys: 0)
    with pytest.raises(AlreadyAssociated) as e:
        authors_stories.add(AuthorRepository, sample_author.id, sample_story.id)
    assert e.value.message == (
        f"story_id: Story {sample_story.id} is already associated with Author {sample_author.id}"
    )
    assert db_session.query(AuthorStory).count() == 1
