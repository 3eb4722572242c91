# core/sa/models/volume.py
from sqlalchemy import Boolean, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, VersionMixin

MEDIA_VALUES = [
    "Book",       # Physical book
    "Kindle",     # Downloaded to Kindle app as purchased
    "Kobo",       # Downloaded to Kobo app
    "PDF",        # Downloaded as a PDF
    "Returned",   # Returned to Kindle Unlimited but available to reload
    "Unlimited",  # Downloaded to Kindle app as Unlimited
    "Unknown",    # Unknown media type
    "Watch",      # Not yet purchased or downloaded
]

class VolumeStory(Base):
    """Association of volumes with the stories they contain"""
    __tablename__ = 'volumes_stories'

    volume_id: Mapped[int] = mapped_column(ForeignKey('volumes.id', ondelete='CASCADE'), primary_key=True)
    story_id: Mapped[int] = mapped_column(ForeignKey('stories.id', ondelete='CASCADE'), primary_key=True)

class Volume(Base, TimestampMixin, VersionMixin):
    __tablename__ = 'volumes'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    library_id: Mapped[int] = mapped_column(ForeignKey('library.id', ondelete='CASCADE'), nullable=False)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    media: Mapped[str | None] = mapped_column(String(50), nullable=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)
    read: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    # Relationships
    library = relationship('Library', viewonly=True)

    # Convenience relationships
    authors = relationship('Author', secondary='authors_volumes', viewonly=True,
                           order_by='[Author.last_name, Author.first_name]')
    stories = relationship('Story', secondary='volumes_stories', viewonly=True, order_by='Story.name')

    __table_args__ = (
        UniqueConstraint('library_id', 'name', name='uix_volumes_name_library'),
    )
