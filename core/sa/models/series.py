# core/sa/models/series.py
from sqlalchemy import Integer, SmallInteger, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, VersionMixin

class SeriesStory(Base):
    """Association model for stories in series"""
    __tablename__ = 'series_stories'

    series_id: Mapped[int] = mapped_column(ForeignKey('series.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('stories.id', ondelete='CASCADE'), primary_key=True)
    ordinal: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)  # Reading order within the series

class Series(Base, TimestampMixin, VersionMixin):
    __tablename__ = 'series'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)

    # Relationships
    library = relationship('Library', viewonly=True)

    # Convenience relationships
    authors = relationship('Author', secondary='authors_series', viewonly=True,
                           order_by='[Author.last_name, Author.first_name]')
    stories = relationship('Story', secondary='series_stories', viewonly=True, order_by='Story.name')

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_series_name_library'),
    )
