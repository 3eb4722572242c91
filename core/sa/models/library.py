# core/sa/models/library.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, VersionMixin

class Library(Base, TimestampMixin, VersionMixin):
    __tablename__ = 'library'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    notes: Mapped[str | None] = mapped_column(String, nullable=True)

    # Convenience relationships
    authors = relationship('Author', viewonly=True,
                           order_by='[Author.last_name, Author.first_name]')
    series = relationship('Series', viewonly=True, order_by='Series.name')
    stories = relationship('Story', viewonly=True, order_by='Story.name')
    volumes = relationship('Volume', viewonly=True, order_by='Volume.name')
