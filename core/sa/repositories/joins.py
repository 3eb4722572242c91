# core/sa/repositories/joins.py
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Type

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import AlreadyAssociated, BadRequest, NotFound
from core.sa.database import transaction
from core.sa.models import (
    Author, AuthorSeries, AuthorStory, AuthorVolume,
    Series, SeriesStory, Story, Volume, VolumeStory
)
from core.sa.query_options import QueryOptions, compose
from .base import EntityRepository
from .author import AuthorRepository
from .series import SeriesRepository
from .story import StoryRepository
from .volume import VolumeRepository

@dataclass(frozen=True)
class JoinTable:
    """A many-to-many join relation between two entity kinds.

    ``left`` and ``right`` are the repository classes of the two sides, and
    ``left_key`` / ``right_key`` the join columns referencing them.
    """
    model: type
    left: Type[EntityRepository]
    left_key: str
    right: Type[EntityRepository]
    right_key: str

    def key_for(self, side: Type[EntityRepository]) -> str:
        return self.left_key if side is self.left else self.right_key

    def other(self, side: Type[EntityRepository]) -> Type[EntityRepository]:
        if side is self.left:
            return self.right
        if side is self.right:
            return self.left
        raise ValueError(f"{side.kind} is not part of {self.model.__tablename__}")

AUTHORS_SERIES = JoinTable(AuthorSeries, AuthorRepository, "author_id", SeriesRepository, "series_id")
AUTHORS_STORIES = JoinTable(AuthorStory, AuthorRepository, "author_id", StoryRepository, "story_id")
AUTHORS_VOLUMES = JoinTable(AuthorVolume, AuthorRepository, "author_id", VolumeRepository, "volume_id")
SERIES_STORIES = JoinTable(SeriesStory, SeriesRepository, "series_id", StoryRepository, "story_id")
VOLUMES_STORIES = JoinTable(VolumeStory, VolumeRepository, "volume_id", StoryRepository, "story_id")

JOIN_TABLES = (AUTHORS_SERIES, AUTHORS_STORIES, AUTHORS_VOLUMES, SERIES_STORIES, VOLUMES_STORIES)

class JoinTableManager:
    """Adds, removes and lists the associations held in one join table.

    Every operation names the ``parent`` side it is invoked from; the other
    side of the join table is the child. Both sides of an association must
    belong to the same Library, and a pair may be associated at most once.
    """

    def __init__(self, session: Session, join: JoinTable):
        self.session = session
        self.join = join

    def _sides(self, parent: Type[EntityRepository]):
        child = self.join.other(parent)
        return (
            parent(self.session), self.join.key_for(parent),
            child(self.session), self.join.key_for(child),
        )

    def _load_parent(self, repo: EntityRepository, key: str, parent_id: Any) -> Any:
        result = repo.get_by_id(parent_id)
        if result is None:
            raise NotFound(f"{key}: Missing {repo.kind} {parent_id}")
        return result

    def _load_pair(self, parent: Type[EntityRepository], parent_id: Any, child_id: Any):
        parent_repo, parent_key, child_repo, child_key = self._sides(parent)
        parent_obj = self._load_parent(parent_repo, parent_key, parent_id)
        child_obj = child_repo.get_by_id(child_id)
        if child_obj is None:
            raise NotFound(f"{child_key}: Missing {child_repo.kind} {child_id}")
        if parent_obj.library_id != child_obj.library_id:
            raise BadRequest(
                f"library_id: {parent_repo.kind} {parent_id} belongs to "
                f"Library {parent_obj.library_id} but {child_repo.kind} {child_id} "
                f"belongs to Library {child_obj.library_id}"
            )
        return child_obj, child_repo, {parent_key: parent_id, child_key: child_id}

    def _count(self, keys: dict) -> int:
        conditions = [getattr(self.join.model, key) == value for key, value in keys.items()]
        return self.session.scalar(select(func.count()).select_from(self.join.model).where(*conditions))

    def add(self, parent: Type[EntityRepository], parent_id: Any, child_id: Any, **values) -> Any:
        """Associate a child with a parent and return the child

        Args:
            parent: Repository class of the side the call is made from
            parent_id: ID of the parent record
            child_id: ID of the child record
            values: Extra join-row columns (e.g. ordinal for series stories)

        Raises:
            NotFound: If either record is missing
            BadRequest: If the records belong to different libraries, or a value
                is not a column of the join table
            AlreadyAssociated: If the pair is already associated
        """
        parent_repo, _, child_repo, _ = self._sides(parent)
        columns = self.join.model.__table__.columns
        for key in values:
            if key not in columns:
                raise BadRequest(f"{key}: Not a column of {self.join.model.__tablename__}")
        try:
            with transaction(self.session):
                child, child_repo, keys = self._load_pair(parent, parent_id, child_id)
                if self._count(keys) > 0:
                    raise self._already_associated(parent_repo, parent_id, child_repo, child_id)
                self.session.add(self.join.model(**keys, **values))
        except IntegrityError as e:
            # Concurrent add won the race past the count check
            raise self._already_associated(parent_repo, parent_id, child_repo, child_id) from e
        return child

    def _already_associated(self, parent_repo, parent_id, child_repo, child_id) -> AlreadyAssociated:
        key = self.join.key_for(type(child_repo))
        return AlreadyAssociated(
            f"{key}: {child_repo.kind} {child_id} is already associated "
            f"with {parent_repo.kind} {parent_id}"
        )

    def remove(self, parent: Type[EntityRepository], parent_id: Any, child_id: Any) -> Any:
        """Dissociate a child from a parent and return the child

        Raises:
            NotFound: If either record is missing
            BadRequest: If the records belong to different libraries or are not associated
        """
        parent_repo, _, child_repo, child_key = self._sides(parent)
        with transaction(self.session):
            child, child_repo, keys = self._load_pair(parent, parent_id, child_id)
            if self._count(keys) == 0:
                raise BadRequest(
                    f"{child_key}: {child_repo.kind} {child_id} is not associated "
                    f"with {parent_repo.kind} {parent_id}"
                )
            conditions = [getattr(self.join.model, key) == value for key, value in keys.items()]
            self.session.execute(delete(self.join.model).where(*conditions))
        return child

    def _children(self, parent: Type[EntityRepository], parent_id: Any):
        parent_repo, parent_key, child_repo, child_key = self._sides(parent)
        self._load_parent(parent_repo, parent_key, parent_id)
        child_model = child_repo.model
        statement = (
            select(child_model)
            .join(self.join.model, getattr(self.join.model, child_key) == child_model.id)
            .where(getattr(self.join.model, parent_key) == parent_id)
        )
        return child_repo, statement

    def all(self, parent: Type[EntityRepository], parent_id: Any,
            options: Optional[QueryOptions] = None) -> List[Any]:
        """Get the children of a parent in the child kind's canonical order"""
        child_repo, statement = self._children(parent, parent_id)
        statement = compose(statement.order_by(*child_repo.ordering()), child_repo.model, options)
        return list(self.session.scalars(statement).all())

    def exact(self, parent: Type[EntityRepository], parent_id: Any, names: Sequence[str],
              options: Optional[QueryOptions] = None) -> Any:
        """Get the single child of a parent whose name fields equal ``names``

        Raises:
            NotFound: If the parent is missing, or zero or several children match
        """
        child_repo, statement = self._children(parent, parent_id)
        statement = compose(
            statement.where(*child_repo.name_match(names)).order_by(*child_repo.ordering()),
            child_repo.model, options
        )
        results = self.session.scalars(statement).all()
        if len(results) != 1:
            raise NotFound(child_repo.describe(names))
        return results[0]

    def name(self, parent: Type[EntityRepository], parent_id: Any, segment: str,
             options: Optional[QueryOptions] = None) -> List[Any]:
        """Get the children of a parent whose name fields contain ``segment``"""
        child_repo, statement = self._children(parent, parent_id)
        statement = compose(
            statement.where(child_repo.name_search(segment)).order_by(*child_repo.ordering()),
            child_repo.model, options
        )
        return list(self.session.scalars(statement).all())
