# core/services/entities.py
from typing import Any, List, Optional, Type

from core.errors import NotFound
from core.sa.query_options import QueryOptions
from core.sa.repositories import (
    AUTHORS_SERIES, AUTHORS_STORIES, AUTHORS_VOLUMES, SERIES_STORIES, VOLUMES_STORIES,
    AuthorRepository, EntityRepository, LibraryRepository, SeriesRepository,
    StoryRepository, VolumeRepository
)
from .base import EntityService

class AuthorService(EntityService):
    repository_class = AuthorRepository
    relationships = {
        "series": AUTHORS_SERIES,
        "stories": AUTHORS_STORIES,
        "volumes": AUTHORS_VOLUMES,
    }

class SeriesService(EntityService):
    repository_class = SeriesRepository
    relationships = {
        "authors": AUTHORS_SERIES,
        "stories": SERIES_STORIES,
    }

class StoryService(EntityService):
    repository_class = StoryRepository
    relationships = {
        "authors": AUTHORS_STORIES,
        "series": SERIES_STORIES,
        "volumes": VOLUMES_STORIES,
    }

class VolumeService(EntityService):
    repository_class = VolumeRepository
    relationships = {
        "authors": AUTHORS_VOLUMES,
        "stories": VOLUMES_STORIES,
    }

class LibraryService(EntityService):
    """Libraries, plus lookups of the authors, series, stories and volumes they hold"""

    repository_class = LibraryRepository

    def _check_library(self, library_id: Any) -> None:
        if self.repository.get_by_id(library_id) is None:
            raise NotFound(f"library_id: Missing Library {library_id}")

    def _children_all(self, child: Type[EntityRepository], library_id: Any,
                      options: Optional[QueryOptions]) -> List[Any]:
        self._check_library(library_id)
        repo = child(self.session)
        return repo.all(options, repo.model.library_id == library_id)

    def _children_exact(self, child: Type[EntityRepository], library_id: Any, names,
                        options: Optional[QueryOptions]) -> Any:
        self._check_library(library_id)
        repo = child(self.session)
        return repo.exact(names, options, repo.model.library_id == library_id)

    def _children_name(self, child: Type[EntityRepository], library_id: Any, segment: str,
                       options: Optional[QueryOptions]) -> List[Any]:
        self._check_library(library_id)
        repo = child(self.session)
        return repo.name(segment, options, repo.model.library_id == library_id)

    # Authors

    def authors_all(self, library_id: Any, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_all(AuthorRepository, library_id, options)

    def authors_exact(self, library_id: Any, first_name: str, last_name: str,
                      options: Optional[QueryOptions] = None) -> Any:
        return self._children_exact(AuthorRepository, library_id, (first_name, last_name), options)

    def authors_name(self, library_id: Any, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_name(AuthorRepository, library_id, segment, options)

    # Series

    def series_all(self, library_id: Any, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_all(SeriesRepository, library_id, options)

    def series_exact(self, library_id: Any, name: str, options: Optional[QueryOptions] = None) -> Any:
        return self._children_exact(SeriesRepository, library_id, (name,), options)

    def series_name(self, library_id: Any, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_name(SeriesRepository, library_id, segment, options)

    # Stories

    def stories_all(self, library_id: Any, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_all(StoryRepository, library_id, options)

    def stories_exact(self, library_id: Any, name: str, options: Optional[QueryOptions] = None) -> Any:
        return self._children_exact(StoryRepository, library_id, (name,), options)

    def stories_name(self, library_id: Any, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_name(StoryRepository, library_id, segment, options)

    # Volumes

    def volumes_all(self, library_id: Any, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_all(VolumeRepository, library_id, options)

    def volumes_exact(self, library_id: Any, name: str, options: Optional[QueryOptions] = None) -> Any:
        return self._children_exact(VolumeRepository, library_id, (name,), options)

    def volumes_name(self, library_id: Any, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self._children_name(VolumeRepository, library_id, segment, options)
