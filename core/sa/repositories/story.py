# core/sa/repositories/story.py
from core.sa.models import AuthorStory, SeriesStory, Story, VolumeStory
from core.sa.validators import library_exists, library_fixed_while_linked, required, unique_name
from .base import EntityRepository

class StoryRepository(EntityRepository):
    model = Story
    kind = "Story"
    fields = ("library_id", "name", "notes")
    order = ("library_id", "name")
    validators = (
        required("library_id", "name"),
        library_exists,
        library_fixed_while_linked(Story, [
            (AuthorStory, "story_id"), (SeriesStory, "story_id"), (VolumeStory, "story_id"),
        ]),
        unique_name(Story, ("library_id", "name")),
    )
