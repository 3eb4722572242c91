# core/sa/repositories/library.py
from core.sa.models import Library
from core.sa.validators import required, unique_name
from .base import EntityRepository

class LibraryRepository(EntityRepository):
    """Repository for managing Library entities."""

    model = Library
    kind = "Library"
    fields = ("name", "notes")
    order = ("name",)
    validators = (
        required("name"),
        unique_name(Library, ("name",), scoped=False),
    )
