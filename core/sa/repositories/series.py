# core/sa/repositories/series.py
from core.sa.models import AuthorSeries, Series, SeriesStory
from core.sa.validators import library_exists, library_fixed_while_linked, required, unique_name
from .base import EntityRepository

class SeriesRepository(EntityRepository):
    model = Series
    kind = "Series"
    fields = ("library_id", "name", "notes")
    order = ("library_id", "name")
    validators = (
        required("library_id", "name"),
        library_exists,
        library_fixed_while_linked(Series, [(AuthorSeries, "series_id"), (SeriesStory, "series_id")]),
        unique_name(Series, ("library_id", "name")),
    )
