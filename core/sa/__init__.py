# core/sa/__init__.py
from .database import Database, get_database, get_db, transaction
from .models import (
    Base, Library, Author, Series, Story, Volume,
    AuthorSeries, AuthorStory, AuthorVolume, SeriesStory, VolumeStory
)

__all__ = [
    'Database',
    'get_database',
    'get_db',
    'transaction',
    'Base',
    'Library',
    'Author',
    'Series',
    'Story',
    'Volume',
    'AuthorSeries',
    'AuthorStory',
    'AuthorVolume',
    'SeriesStory',
    'VolumeStory'
]
