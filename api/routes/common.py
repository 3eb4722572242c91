# api/routes/common.py
from typing import Any, Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.sa.query_options import QueryOptions
from core.services import EntityService
from api.schemas import to_schema

def query_options(request: Request) -> QueryOptions:
    """Parse pagination and withXxx inclusion parameters once per request"""
    return QueryOptions.parse(request.query_params)

def split_names(names: str, count: int) -> tuple:
    """Split an exact-match path into the expected number of name parts"""
    return tuple(names.split("/", count - 1))

def add_crud_routes(
    router: APIRouter,
    service_class: Type[EntityService],
    schema: Type[BaseModel],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
):
    """Register the standard endpoints of an entity kind on ``router``.

    Model specific lookups (``/exact``, ``/name``) come first so they are not
    shadowed by ``/{id}``.
    """
    kind = service_class.repository_class.kind
    name_count = len(service_class.repository_class.name_fields)

    @router.get("/exact/{names:path}", response_model=schema, response_model_exclude_unset=True,
                summary=f"Find {kind} by exact name")
    def get_exact(names: str, options: QueryOptions = Depends(query_options), db: Session = Depends(get_db)):
        return to_schema(service_class(db).exact(*split_names(names, name_count), options=options), schema)

    @router.get("/name/{name}", response_model=List[schema], response_model_exclude_unset=True,
                summary=f"Find {kind} records by name segment")
    def get_name(name: str, options: QueryOptions = Depends(query_options), db: Session = Depends(get_db)):
        return [to_schema(item, schema) for item in service_class(db).name(name, options=options)]

    @router.get("", response_model=List[schema], response_model_exclude_unset=True,
                summary=f"Find all {kind} records")
    def get_all(options: QueryOptions = Depends(query_options), db: Session = Depends(get_db)):
        return [to_schema(item, schema) for item in service_class(db).all(options)]

    @router.post("", response_model=schema, response_model_exclude_unset=True,
                 summary=f"Insert a new {kind}")
    def insert(data: create_schema, db: Session = Depends(get_db)):
        return to_schema(service_class(db).insert(data.model_dump(exclude_unset=True)), schema)

    @router.get("/{id}", response_model=schema, response_model_exclude_unset=True,
                summary=f"Find {kind} by ID")
    def find(id: int, options: QueryOptions = Depends(query_options), db: Session = Depends(get_db)):
        return to_schema(service_class(db).find(id, options), schema)

    @router.put("/{id}", response_model=schema, response_model_exclude_unset=True,
                summary=f"Update {kind} by ID")
    def update(id: int, data: update_schema, db: Session = Depends(get_db)):
        return to_schema(service_class(db).update(id, data.model_dump(exclude_unset=True)), schema)

    @router.delete("/{id}", response_model=schema, response_model_exclude_unset=True,
                   summary=f"Remove {kind} by ID")
    def remove(id: int, db: Session = Depends(get_db)):
        return to_schema(service_class(db).remove(id), schema)

def add_child_routes(
    router: APIRouter,
    path: str,
    child_schema: Type[BaseModel],
    name_count: int,
    lookups: Callable[[Session], Any],
    with_add_remove: bool = True,
    with_ordinal: bool = False,
):
    """Register the listing and lookup endpoints for children reached from ``/{id}/<path>``.

    ``lookups(db)`` returns an object with ``all``, ``exact`` and ``name``
    methods taking the parent ID first, and ``add`` / ``remove`` when
    ``with_add_remove`` is set. Adds accept an ``ordinal`` query parameter
    only when ``with_ordinal`` is set.
    """

    @router.get(f"/{{id}}/{path}/exact/{{names:path}}", response_model=child_schema,
                response_model_exclude_unset=True)
    def child_exact(id: int, names: str, options: QueryOptions = Depends(query_options),
                    db: Session = Depends(get_db)):
        return to_schema(lookups(db).exact(id, *split_names(names, name_count), options=options), child_schema)

    @router.get(f"/{{id}}/{path}/name/{{name}}", response_model=List[child_schema],
                response_model_exclude_unset=True)
    def child_name(id: int, name: str, options: QueryOptions = Depends(query_options),
                   db: Session = Depends(get_db)):
        return [to_schema(item, child_schema) for item in lookups(db).name(id, name, options=options)]

    @router.get(f"/{{id}}/{path}", response_model=List[child_schema], response_model_exclude_unset=True)
    def child_all(id: int, options: QueryOptions = Depends(query_options), db: Session = Depends(get_db)):
        return [to_schema(item, child_schema) for item in lookups(db).all(id, options)]

    if not with_add_remove:
        return

    if with_ordinal:
        @router.post(f"/{{id}}/{path}/{{child_id}}", response_model=child_schema,
                     response_model_exclude_unset=True)
        def child_add(id: int, child_id: int, ordinal: Optional[int] = None, db: Session = Depends(get_db)):
            values = {"ordinal": ordinal} if ordinal is not None else {}
            return to_schema(lookups(db).add(id, child_id, **values), child_schema)
    else:
        @router.post(f"/{{id}}/{path}/{{child_id}}", response_model=child_schema,
                     response_model_exclude_unset=True)
        def child_add(id: int, child_id: int, db: Session = Depends(get_db)):
            return to_schema(lookups(db).add(id, child_id), child_schema)

    @router.delete(f"/{{id}}/{path}/{{child_id}}", response_model=child_schema,
                   response_model_exclude_unset=True)
    def child_remove(id: int, child_id: int, db: Session = Depends(get_db)):
        return to_schema(lookups(db).remove(id, child_id), child_schema)
