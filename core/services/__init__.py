# core/services/__init__.py
from .base import EntityService, Relationship
from .entities import AuthorService, LibraryService, SeriesService, StoryService, VolumeService
from .catalog_importer import CatalogImporter, resync

__all__ = [
    'EntityService',
    'Relationship',
    'AuthorService',
    'LibraryService',
    'SeriesService',
    'StoryService',
    'VolumeService',
    'CatalogImporter',
    'resync'
]
