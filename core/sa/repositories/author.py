# core/sa/repositories/author.py
from core.sa.models import Author, AuthorSeries, AuthorStory, AuthorVolume
from core.sa.validators import library_exists, library_fixed_while_linked, required, unique_name
from .base import EntityRepository

class AuthorRepository(EntityRepository):
    """Repository for managing Author entities.

    Authors are named by the (first_name, last_name) pair, which must be unique
    within a Library.
    """

    model = Author
    kind = "Author"
    fields = ("first_name", "last_name", "library_id", "notes")
    order = ("library_id", "last_name", "first_name")
    name_fields = ("first_name", "last_name")
    validators = (
        required("first_name", "last_name", "library_id"),
        library_exists,
        library_fixed_while_linked(Author, [
            (AuthorSeries, "author_id"), (AuthorStory, "author_id"), (AuthorVolume, "author_id"),
        ]),
        unique_name(Author, ("library_id", "first_name", "last_name")),
    )
