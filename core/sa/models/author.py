# core/sa/models/author.py
from sqlalchemy import Integer, String, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, VersionMixin

class AuthorSeries(Base):
    """Association of authors with series"""
    __tablename__ = 'authors_series'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), nullable=False)
    series_id: Mapped[int] = mapped_column(ForeignKey('series.id', ondelete='CASCADE'), nullable=False)

    __table_args__ = (
        UniqueConstraint('author_id', 'series_id', name='uix_authors_series_join'),
    )

class AuthorStory(Base):
    """Association of authors with stories"""
    __tablename__ = 'authors_stories'

    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('stories.id', ondelete='CASCADE'), primary_key=True)

class AuthorVolume(Base):
    """Association of authors with volumes"""
    __tablename__ = 'authors_volumes'

    author_id: Mapped[int] = mapped_column(ForeignKey('authors.id', ondelete='CASCADE'), primary_key=True)
    volume_id: Mapped[int] = mapped_column(ForeignKey('volumes.id', ondelete='CASCADE'), primary_key=True)

class Author(Base, TimestampMixin, VersionMixin):
    __tablename__ = 'authors'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)

    # Relationships
    library = relationship('Library', viewonly=True)

    # Convenience relationships
    series = relationship('Series', secondary='authors_series', viewonly=True, order_by='Series.name')
    stories = relationship('Story', secondary='authors_stories', viewonly=True, order_by='Story.name')
    volumes = relationship('Volume', secondary='authors_volumes', viewonly=True, order_by='Volume.name')

    __table_args__ = (
        UniqueConstraint('library_id', 'first_name', 'last_name', name='uix_authors_name_library'),
        # Search indexes
        Index('idx_authors_last_name', 'last_name'),
    )
