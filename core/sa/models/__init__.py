# core/sa/models/__init__.py
from .base import Base, TimestampMixin, VersionMixin
from .library import Library
from .author import Author, AuthorSeries, AuthorStory, AuthorVolume
from .series import Series, SeriesStory
from .story import Story
from .volume import Volume, VolumeStory, MEDIA_VALUES

__all__ = [
    'Base',
    'TimestampMixin',
    'VersionMixin',
    'Library',
    'Author',
    'AuthorSeries',
    'AuthorStory',
    'AuthorVolume',
    'Series',
    'SeriesStory',
    'Story',
    'Volume',
    'VolumeStory',
    'MEDIA_VALUES'
]
