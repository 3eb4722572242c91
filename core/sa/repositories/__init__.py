# core/sa/repositories/__init__.py
from .base import EntityRepository
from .library import LibraryRepository
from .author import AuthorRepository
from .series import SeriesRepository
from .story import StoryRepository
from .volume import VolumeRepository
from .joins import (
    JoinTable, JoinTableManager, JOIN_TABLES,
    AUTHORS_SERIES, AUTHORS_STORIES, AUTHORS_VOLUMES, SERIES_STORIES, VOLUMES_STORIES
)

__all__ = [
    'EntityRepository',
    'LibraryRepository',
    'AuthorRepository',
    'SeriesRepository',
    'StoryRepository',
    'VolumeRepository',
    'JoinTable',
    'JoinTableManager',
    'JOIN_TABLES',
    'AUTHORS_SERIES',
    'AUTHORS_STORIES',
    'AUTHORS_VOLUMES',
    'SERIES_STORIES',
    'VOLUMES_STORIES'
]
