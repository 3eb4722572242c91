# api/schemas/__init__.py
from .catalog import (
    LibraryBase, AuthorBase, SeriesBase, StoryBase, VolumeBase,
    LibrarySchema, AuthorSchema, SeriesSchema, StorySchema, VolumeSchema,
    LibraryCreate, LibraryUpdate, AuthorCreate, AuthorUpdate,
    SeriesCreate, SeriesUpdate, StoryCreate, StoryUpdate,
    VolumeCreate, VolumeUpdate, ImportResults, to_schema
)

__all__ = [
    'LibraryBase', 'AuthorBase', 'SeriesBase', 'StoryBase', 'VolumeBase',
    'LibrarySchema', 'AuthorSchema', 'SeriesSchema', 'StorySchema', 'VolumeSchema',
    'LibraryCreate', 'LibraryUpdate', 'AuthorCreate', 'AuthorUpdate',
    'SeriesCreate', 'SeriesUpdate', 'StoryCreate', 'StoryUpdate',
    'VolumeCreate', 'VolumeUpdate', 'ImportResults', 'to_schema'
]
