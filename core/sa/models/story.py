# core/sa/models/story.py
from sqlalchemy import Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, VersionMixin

class Story(Base, TimestampMixin, VersionMixin):
    __tablename__ = 'stories'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)

    # Relationships
    library = relationship('Library', viewonly=True)

    # Convenience relationships
    authors = relationship('Author', secondary='authors_stories', viewonly=True,
                           order_by='[Author.last_name, Author.first_name]')
    series = relationship('Series', secondary='series_stories', viewonly=True, order_by='Series.name')
    volumes = relationship('Volume', secondary='volumes_stories', viewonly=True, order_by='Volume.name')

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_stories_name_library'),
    )
