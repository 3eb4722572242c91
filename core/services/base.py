# core/services/base.py
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from sqlalchemy.orm import Session

from core.sa.query_options import QueryOptions
from core.sa.repositories import EntityRepository, JoinTable, JoinTableManager

class Relationship:
    """The join operations of one relationship, bound to a parent kind.

    ``AuthorService(session).series.add(author_id, series_id)`` and
    ``SeriesService(session).authors.add(series_id, author_id)`` write the same
    join row through the same manager.
    """

    def __init__(self, manager: JoinTableManager, parent: Type[EntityRepository]):
        self.manager = manager
        self.parent = parent

    def add(self, parent_id: Any, child_id: Any, **values) -> Any:
        return self.manager.add(self.parent, parent_id, child_id, **values)

    def remove(self, parent_id: Any, child_id: Any) -> Any:
        return self.manager.remove(self.parent, parent_id, child_id)

    def all(self, parent_id: Any, options: Optional[QueryOptions] = None) -> List[Any]:
        return self.manager.all(self.parent, parent_id, options)

    def exact(self, parent_id: Any, *names: str, options: Optional[QueryOptions] = None) -> Any:
        return self.manager.exact(self.parent, parent_id, names, options)

    def name(self, parent_id: Any, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self.manager.name(self.parent, parent_id, segment, options)

class EntityService:
    """Standard CRUD and name lookups for one entity kind, plus its relationships.

    ``relationships`` maps an attribute name to the join table it exposes;
    each becomes a :class:`Relationship` bound to this service's kind.
    """

    repository_class: ClassVar[Type[EntityRepository]]
    relationships: ClassVar[Dict[str, JoinTable]] = {}

    def __init__(self, session: Session):
        self.session = session
        self.repository = self.repository_class(session)
        for attribute, join in self.relationships.items():
            setattr(self, attribute, Relationship(JoinTableManager(session, join), self.repository_class))

    def all(self, options: Optional[QueryOptions] = None) -> List[Any]:
        return self.repository.all(options)

    def find(self, id: Any, options: Optional[QueryOptions] = None) -> Any:
        return self.repository.find(id, options)

    def insert(self, data: Mapping[str, Any]) -> Any:
        return self.repository.insert(data)

    def update(self, id: Any, data: Mapping[str, Any]) -> Any:
        return self.repository.update(id, data)

    def remove(self, id: Any) -> Any:
        return self.repository.remove(id)

    def exact(self, *names: str, options: Optional[QueryOptions] = None) -> Any:
        return self.repository.exact(names, options)

    def name(self, segment: str, options: Optional[QueryOptions] = None) -> List[Any]:
        return self.repository.name(segment, options)
