# core/services/catalog_importer.py
import csv
import io
import logging
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from sqlalchemy.orm import Session

from core.errors import AlreadyAssociated, NotFound
from core.sa import database
from core.sa.models import Library
from .base import Relationship
from .entities import (
    AuthorService, LibraryService, SeriesService, StoryService, VolumeService
)

logger = logging.getLogger(__name__)

# Column order of the catalog spreadsheet; the file's own header row is skipped
CSV_HEADERS = [
    "lastName",
    "firstName",
    "name",
    "year",
    "box",
    "read",
    "seriesName",
    "seriesOrdinal",
    "notes",
]

# Values of the box column naming an electronic media type
ELECTRONIC_MEDIA = {"Kindle", "Kobo", "Returned", "Unlimited"}

READ_MARKER = "x"
UNKNOWN_NAME = "?"

def new_results() -> Dict[str, int]:
    return {
        "countRows": 0,
        "countAuthors": 0,
        "countAuthorsSeries": 0,
        "countAuthorsStories": 0,
        "countAuthorsVolumes": 0,
        "countSeries": 0,
        "countSeriesStories": 0,
        "countStories": 0,
        "countVolumes": 0,
        "countVolumesStories": 0,
    }

def classify_box(box: Optional[str]) -> Tuple[str, Optional[str]]:
    """Map the box column to (media, location)"""
    if box in ELECTRONIC_MEDIA:
        return box, None
    return "Book", box or None

def parse_ordinal(value: Optional[str]) -> Optional[int]:
    try:
        return int(value) if value else None
    except ValueError:
        return None

def read_rows(text: str) -> Iterator[Dict[str, str]]:
    """Yield catalog rows from CSV text, skipping its header line"""
    reader = csv.DictReader(io.StringIO(text), fieldnames=CSV_HEADERS, restval="")
    for index, row in enumerate(reader):
        if index == 0:
            continue
        yield {key: (value or "").strip() for key, value in row.items() if key in CSV_HEADERS}

class CatalogImporter:
    """Loads spreadsheet rows into a single Library.

    Every entity is found by its natural key or created, and every association
    is added unless it already exists, so importing the same rows again makes
    no changes. ``results`` counts what was actually created.
    """

    def __init__(self, session: Session, library: Library):
        self.session = session
        self.library = library
        self.libraries = LibraryService(session)
        self.authors = AuthorService(session)
        self.series = SeriesService(session)
        self.stories = StoryService(session)
        self.volumes = VolumeService(session)
        self.results = new_results()

    @classmethod
    def for_library(cls, session: Session, name: str) -> "CatalogImporter":
        """Create an importer for the named Library, creating the Library if needed"""
        libraries = LibraryService(session)
        try:
            library = libraries.exact(name)
        except NotFound:
            library = libraries.insert({
                "name": name,
                "notes": f"Personal Library for {name}",
            })
            logger.info("Created library %s '%s'", library.id, name)
        return cls(session, library)

    def import_csv(self, text: str) -> Dict[str, int]:
        """Process every row of a CSV document in order and return the counters"""
        for row in read_rows(text):
            self.process(row)
        return self.results

    def process(self, row: Mapping[str, Any]) -> None:
        """Process one catalog row, updating ``results``"""
        logger.info("Process: %s", dict(row))
        self.results["countRows"] += 1
        library_id = self.library.id

        first_name = row.get("firstName") or UNKNOWN_NAME
        last_name = row.get("lastName") or UNKNOWN_NAME
        name = row.get("name") or None
        notes = row.get("notes") or None

        author, created = self._acquire(
            lambda: self.libraries.authors_exact(library_id, first_name, last_name),
            lambda: self.authors.insert({
                "first_name": first_name,
                "last_name": last_name,
                "library_id": library_id,
            }),
        )
        self._count("countAuthors", created)
        logger.info("Author:  %s %s %s", author.id, author.first_name, author.last_name)

        story = volume = None
        if name:
            story, created = self._acquire(
                lambda: self.libraries.stories_exact(library_id, name),
                lambda: self.stories.insert({"library_id": library_id, "name": name, "notes": notes}),
            )
            self._count("countStories", created)

            media, location = classify_box(row.get("box"))
            volume, created = self._acquire(
                lambda: self.libraries.volumes_exact(library_id, name),
                lambda: self.volumes.insert({
                    "library_id": library_id,
                    "location": location,
                    "media": media,
                    "name": name,
                    "notes": notes,
                    "read": row.get("read") == READ_MARKER,
                }),
            )
            self._count("countVolumes", created)
            logger.info("Volume:  %s %s", volume.id, volume.name)

        series_name = row.get("seriesName")
        if series_name:
            series, created = self._acquire(
                lambda: self.libraries.series_exact(library_id, series_name),
                lambda: self.series.insert({"library_id": library_id, "name": series_name}),
            )
            self._count("countSeries", created)
            logger.info("Series:  %s %s", series.id, series.name)

            self._count("countAuthorsSeries", self._assign(self.authors.series, author.id, series.id))
            if story is not None:
                self._count("countSeriesStories", self._assign(
                    self.series.stories, series.id, story.id,
                    ordinal=parse_ordinal(row.get("seriesOrdinal")),
                ))

        if story is not None:
            self._count("countAuthorsStories", self._assign(self.authors.stories, author.id, story.id))
            self._count("countVolumesStories", self._assign(self.volumes.stories, volume.id, story.id))
            self._count("countAuthorsVolumes", self._assign(self.authors.volumes, author.id, volume.id))

    def _count(self, counter: str, created: bool) -> None:
        if created:
            self.results[counter] += 1

    @staticmethod
    def _acquire(find, insert) -> Tuple[Any, bool]:
        """Find a record, or insert it when the lookup fails. Returns (record, created)."""
        try:
            return find(), False
        except NotFound:
            return insert(), True

    @staticmethod
    def _assign(relationship: Relationship, parent_id: Any, child_id: Any, **values) -> bool:
        """Add an association unless it already exists. Returns whether it was added."""
        try:
            relationship.add(parent_id, child_id, **values)
            return True
        except AlreadyAssociated:
            return False

def resync(session: Session) -> str:
    """Drop and recreate all catalog tables. Every Library and its catalog is lost."""
    session.close()
    database.resync(session.get_bind())
    return "Resynchronized database tables"
