# core/sa/repositories/base.py
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import BadRequest, NotFound, ValidationError
from core.sa.database import transaction
from core.sa.query_options import QueryOptions, compose
from core.sa.validators import Validator, run_validators

class EntityRepository:
    """Validated CRUD for one catalog entity kind.

    Subclasses set the mapped ``model``, the ``fields`` accepted on insert and
    update, the canonical ``order`` and the ``validators`` run before writes.
    """

    model: ClassVar[type]
    kind: ClassVar[str]
    fields: ClassVar[Tuple[str, ...]]
    order: ClassVar[Tuple[str, ...]]
    name_fields: ClassVar[Tuple[str, ...]] = ("name",)
    validators: ClassVar[Sequence[Validator]] = ()

    def __init__(self, session: Session):
        self.session = session

    # Queries

    def ordering(self) -> list:
        return [getattr(self.model, column).asc() for column in self.order]

    def all(self, options: Optional[QueryOptions] = None, *conditions) -> List[Any]:
        """Get every record (matching any extra ``conditions``) in canonical order"""
        statement = compose(
            select(self.model).where(*conditions).order_by(*self.ordering()),
            self.model, options
        )
        return list(self.session.scalars(statement).all())

    def get_by_id(self, id: int, options: Optional[QueryOptions] = None) -> Optional[Any]:
        statement = compose(select(self.model).where(self.model.id == id), self.model, options)
        return self.session.scalars(statement).first()

    def find(self, id: int, options: Optional[QueryOptions] = None) -> Any:
        """Get a record by ID

        Raises:
            NotFound: If no record has this ID
        """
        result = self.get_by_id(id, options)
        if result is None:
            raise NotFound(f"id: Missing {self.kind} {id}")
        return result

    def name_match(self, names: Sequence[str]) -> list:
        """Conditions for an exact match on the natural name fields"""
        return [getattr(self.model, field) == value for field, value in zip(self.name_fields, names)]

    def name_search(self, segment: str):
        """Condition for a case-insensitive substring match on any name field"""
        pattern = f"%{segment}%"
        return or_(*[getattr(self.model, field).ilike(pattern) for field in self.name_fields])

    def describe(self, names: Sequence[str]) -> str:
        return f"name: Missing {self.kind} '{' '.join(str(name) for name in names)}'"

    def exact(self, names: Sequence[str], options: Optional[QueryOptions] = None, *conditions) -> Any:
        """Get the single record whose name fields equal ``names``

        Raises:
            NotFound: If zero or several records match
        """
        statement = compose(
            select(self.model).where(*self.name_match(names), *conditions).order_by(*self.ordering()),
            self.model, options
        )
        results = self.session.scalars(statement).all()
        if len(results) != 1:
            raise NotFound(self.describe(names))
        return results[0]

    def name(self, segment: str, options: Optional[QueryOptions] = None, *conditions) -> List[Any]:
        """Get records whose name fields contain ``segment``, ignoring case"""
        statement = compose(
            select(self.model).where(self.name_search(segment), *conditions).order_by(*self.ordering()),
            self.model, options
        )
        return list(self.session.scalars(statement).all())

    # Writes

    def _allowed(self, data: Mapping[str, Any], extra: Tuple[str, ...] = ()) -> Dict[str, Any]:
        return {key: value for key, value in data.items() if key in self.fields or key in extra}

    def _columns(self, instance) -> Dict[str, Any]:
        return {column.key: getattr(instance, column.key) for column in self.model.__table__.columns}

    def insert(self, data: Mapping[str, Any]) -> Any:
        """Validate and create a new record

        Raises:
            BadRequest: If validation fails or a storage constraint is violated
        """
        values = self._allowed(data)
        try:
            with transaction(self.session):
                run_validators(self.validators, dict(values), self.session)
                instance = self.model(**values)
                self.session.add(instance)
        except ValidationError as e:
            raise BadRequest(str(e)) from e
        except IntegrityError as e:
            raise BadRequest(f"{self.kind} violates a storage constraint: {e.orig}") from e
        return instance

    def update(self, id: int, data: Mapping[str, Any]) -> Any:
        """Validate and apply changes to an existing record

        Only the allowed fields (plus ``id``) are written. Returns the record
        as reloaded after the update.

        Raises:
            NotFound: If no record has this ID
            BadRequest: If validation fails or no row was updated
        """
        original = self.find(id)
        values = self._allowed(data, extra=("id",))
        candidate = {**self._columns(original), **values}
        candidate["id"] = id
        try:
            with transaction(self.session):
                run_validators(self.validators, candidate, self.session)
                result = self.session.execute(
                    update(self.model)
                    .where(self.model.id == id)
                    .values(**values, version=self.model.version + 1)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    raise BadRequest(f"id: Cannot update {self.kind} {id}")
        except ValidationError as e:
            raise BadRequest(str(e)) from e
        except IntegrityError as e:
            raise BadRequest(f"{self.kind} violates a storage constraint: {e.orig}") from e
        self.session.expire_all()
        return self.find(values.get("id", id))

    def remove(self, id: int) -> Any:
        """Delete a record, returning its state from just before the delete

        Raises:
            NotFound: If no record has this ID, or nothing was deleted
        """
        result = self.find(id)
        self.session.expunge(result)
        with transaction(self.session):
            count = self.session.execute(
                delete(self.model)
                .where(self.model.id == id)
                .execution_options(synchronize_session=False)
            ).rowcount
            if count != 1:
                raise NotFound(f"id: Cannot remove {self.kind} {id}")
        return result
