# api/schemas/catalog.py
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ConfigDict
from sqlalchemy import inspect

# Reusable Schemas for Models
class LibraryBase(BaseModel):
    id: int
    name: str
    notes: Optional[str] = None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class AuthorBase(BaseModel):
    id: int
    first_name: str
    last_name: str
    library_id: int
    notes: Optional[str] = None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class SeriesBase(BaseModel):
    id: int
    library_id: int
    name: str
    notes: Optional[str] = None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class StoryBase(BaseModel):
    id: int
    library_id: int
    name: str
    notes: Optional[str] = None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class VolumeBase(BaseModel):
    id: int
    isbn: Optional[str] = None
    library_id: int
    location: Optional[str] = None
    media: Optional[str] = None
    name: str
    notes: Optional[str] = None
    read: Optional[bool] = None
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

# Related records are only present when requested with a withXxx parameter
class LibrarySchema(LibraryBase):
    authors: Optional[List[AuthorBase]] = None
    series: Optional[List[SeriesBase]] = None
    stories: Optional[List[StoryBase]] = None
    volumes: Optional[List[VolumeBase]] = None

class AuthorSchema(AuthorBase):
    library: Optional[LibraryBase] = None
    series: Optional[List[SeriesBase]] = None
    stories: Optional[List[StoryBase]] = None
    volumes: Optional[List[VolumeBase]] = None

class SeriesSchema(SeriesBase):
    library: Optional[LibraryBase] = None
    authors: Optional[List[AuthorBase]] = None
    stories: Optional[List[StoryBase]] = None

class StorySchema(StoryBase):
    library: Optional[LibraryBase] = None
    authors: Optional[List[AuthorBase]] = None
    series: Optional[List[SeriesBase]] = None
    volumes: Optional[List[VolumeBase]] = None

class VolumeSchema(VolumeBase):
    library: Optional[LibraryBase] = None
    authors: Optional[List[AuthorBase]] = None
    stories: Optional[List[StoryBase]] = None

# Request bodies. Required fields are checked by the repositories so that
# missing values produce the same messages as any other validation failure.
class LibraryCreate(BaseModel):
    name: Optional[str] = None
    notes: Optional[str] = None

class LibraryUpdate(LibraryCreate):
    id: Optional[int] = None

class AuthorCreate(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    library_id: Optional[int] = None
    notes: Optional[str] = None

class AuthorUpdate(AuthorCreate):
    id: Optional[int] = None

class SeriesCreate(BaseModel):
    library_id: Optional[int] = None
    name: Optional[str] = None
    notes: Optional[str] = None

class SeriesUpdate(SeriesCreate):
    id: Optional[int] = None

class StoryCreate(SeriesCreate):
    pass

class StoryUpdate(StoryCreate):
    id: Optional[int] = None

class VolumeCreate(BaseModel):
    isbn: Optional[str] = None
    library_id: Optional[int] = None
    location: Optional[str] = None
    media: Optional[str] = None
    name: Optional[str] = None
    notes: Optional[str] = None
    read: Optional[bool] = None

class VolumeUpdate(VolumeCreate):
    id: Optional[int] = None

class ImportResults(BaseModel):
    countRows: int = 0
    countAuthors: int = 0
    countAuthorsSeries: int = 0
    countAuthorsStories: int = 0
    countAuthorsVolumes: int = 0
    countSeries: int = 0
    countSeriesStories: int = 0
    countStories: int = 0
    countVolumes: int = 0
    countVolumesStories: int = 0

SchemaT = TypeVar("SchemaT", bound=BaseModel)

def _loaded(instance: Any, nested: bool = True) -> Dict[str, Any]:
    """Column values plus whichever relationships are already loaded (one level deep)"""
    state = inspect(instance)
    data = {column.key: getattr(instance, column.key) for column in state.mapper.column_attrs}
    if not nested:
        return data
    for relationship in state.mapper.relationships:
        if relationship.key in state.unloaded:
            continue
        value = getattr(instance, relationship.key)
        if value is None:
            data[relationship.key] = None
        elif relationship.uselist:
            data[relationship.key] = [_loaded(item, nested=False) for item in value]
        else:
            data[relationship.key] = _loaded(value, nested=False)
    return data

def to_schema(instance: Any, schema: Type[SchemaT]) -> SchemaT:
    """Build a response schema without triggering lazy loads.

    Relationships that were not eagerly loaded stay unset, so responses built
    with ``response_model_exclude_unset`` leave them out entirely.
    """
    return schema.model_validate(_loaded(instance))
