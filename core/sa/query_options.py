# core/sa/query_options.py
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Union

from sqlalchemy import Select
from sqlalchemy.orm import selectinload

# Inclusion flag -> relationship attribute loaded when the flag is set
INCLUDES = {
    "with_authors": "authors",
    "with_library": "library",
    "with_series": "series",
    "with_stories": "stories",
    "with_volumes": "volumes",
}

# Query parameter name -> QueryOptions field
PARAMETERS = {
    "withAuthors": "with_authors",
    "withLibrary": "with_library",
    "withSeries": "with_series",
    "withStories": "with_stories",
    "withVolumes": "with_volumes",
}

def _parse_int(value: str) -> int:
    try:
        number = int(value, 10)
    except (TypeError, ValueError):
        raise ValueError(f"{value} is not a number") from None
    if number < 0:
        raise ValueError(f"{value} is not a positive number")
    return number

@dataclass(frozen=True)
class QueryOptions:
    """Pagination and eager-loading choices for a read, parsed once per request"""
    limit: Optional[int] = None
    offset: Optional[int] = None
    with_authors: bool = False
    with_library: bool = False
    with_series: bool = False
    with_stories: bool = False
    with_volumes: bool = False

    @classmethod
    def parse(cls, params: Optional[Mapping[str, str]]) -> "QueryOptions":
        """Build options from raw query parameters.

        ``limit`` and ``offset`` must be non-negative integers. An inclusion flag such as
        ``withAuthors`` is active only when present with an empty value.
        Unrecognized parameters are ignored and ``params`` is not modified.

        Raises:
            ValueError: If limit or offset is not a number, or is negative
        """
        if not params:
            return cls()
        values = {}
        for name in ("limit", "offset"):
            if params.get(name):
                values[name] = _parse_int(params[name])
        for name, field in PARAMETERS.items():
            if params.get(name) == "":
                values[field] = True
        return cls(**values)

    @property
    def includes(self) -> list[str]:
        return [INCLUDES[f.name] for f in fields(self) if f.name in INCLUDES and getattr(self, f.name)]

    def apply(self, statement: Select, model) -> Select:
        """Layer pagination and eager loads onto ``statement``.

        Ordering and filtering already present on the statement are kept.
        Inclusion flags naming a relationship ``model`` does not have are skipped.
        """
        for name in self.includes:
            attribute = getattr(model, name, None)
            if attribute is not None:
                statement = statement.options(selectinload(attribute))
        if self.offset is not None:
            statement = statement.offset(self.offset)
        if self.limit is not None:
            statement = statement.limit(self.limit)
        return statement

def compose(statement: Select, model, params: Union[QueryOptions, Mapping[str, str], None] = None) -> Select:
    """Apply query parameters (raw or already parsed) to a base statement"""
    options = params if isinstance(params, QueryOptions) else QueryOptions.parse(params)
    return options.apply(statement, model)
