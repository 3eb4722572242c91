# core/sa/validators.py
"""Record validations run by the repositories before every insert and update.

Each validator is a plain function ``(candidate, session)`` where ``candidate``
is a dict holding the full prospective state of the record (including ``id``
when an existing record is being updated). Validators read the store through
the session and raise ``ValidationError`` on the first problem found.
"""
from typing import Any, Callable, Dict, Sequence, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from core.errors import ValidationError
from core.sa.models import Library, MEDIA_VALUES

Validator = Callable[[Dict[str, Any], Session], None]

def required(*fields: str) -> Validator:
    """Require each of the given fields to be present and not None"""
    def validate(candidate: Dict[str, Any], session: Session) -> None:
        for field in fields:
            if candidate.get(field) is None:
                raise ValidationError(f"{field}: Is required")
    return validate

def library_exists(candidate: Dict[str, Any], session: Session) -> None:
    """The referenced library_id must name an existing Library"""
    library_id = candidate.get("library_id")
    if library_id is None:
        return
    if session.get(Library, library_id) is None:
        raise ValidationError(f"library_id: Missing Library {library_id}")

def unique_name(model, key_fields: Sequence[str], scoped: bool = True) -> Validator:
    """No other record of ``model`` may share the values of ``key_fields``.

    Args:
        model: Mapped class to count against
        key_fields: Columns forming the natural key (library_id included when scoped)
        scoped: Whether the key is scoped to a Library (affects the message only)
    """
    def validate(candidate: Dict[str, Any], session: Session) -> None:
        conditions = [getattr(model, field) == candidate.get(field) for field in key_fields]
        if candidate.get("id") is not None:
            conditions.append(model.id != candidate["id"])
        found = session.scalar(select(func.count()).select_from(model).where(*conditions))
        if found:
            names = [str(candidate.get(field)) for field in key_fields if field != "library_id"]
            suffix = " within this Library" if scoped else ""
            raise ValidationError(f"name: Name '{' '.join(names)}' is already in use{suffix}")
    return validate

def valid_media(candidate: Dict[str, Any], session: Session) -> None:
    media = candidate.get("media")
    if media is not None and media not in MEDIA_VALUES:
        raise ValidationError(f"media: Value '{media}' is not one of {', '.join(MEDIA_VALUES)}")

def run_validators(validators: Sequence[Validator], candidate: Dict[str, Any], session: Session) -> None:
    for validate in validators:
        validate(candidate, session)

def library_fixed_while_linked(model, links: Sequence[Tuple[Any, str]]) -> Validator:
    """An existing record may not change library_id while it has join rows.

    Args:
        model: Mapped class being validated
        links: (join model, column referencing ``model``) pairs to check
    """
    def validate(candidate: Dict[str, Any], session: Session) -> None:
        id = candidate.get("id")
        if id is None:
            return
        current = session.scalar(select(model.library_id).where(model.id == id))
        if current is None or current == candidate.get("library_id"):
            return
        for join_model, key in links:
            found = session.scalar(
                select(func.count()).select_from(join_model).where(getattr(join_model, key) == id)
            )
            if found:
                raise ValidationError(
                    f"library_id: Cannot move {model.__name__} {id} to Library "
                    f"{candidate.get('library_id')} while it is associated within Library {current}"
                )
    return validate
