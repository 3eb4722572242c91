# api/routes/libraries.py
from types import SimpleNamespace

from fastapi import APIRouter

from core.services import LibraryService
from api.schemas import (
    AuthorBase, LibraryCreate, LibrarySchema, LibraryUpdate,
    SeriesBase, StoryBase, VolumeBase
)
from .common import add_child_routes, add_crud_routes

router = APIRouter(prefix="/libraries", tags=["libraries"])

add_crud_routes(router, LibraryService, LibrarySchema, LibraryCreate, LibraryUpdate)

def _children(kind: str):
    def lookups(db):
        service = LibraryService(db)
        return SimpleNamespace(
            all=getattr(service, f"{kind}_all"),
            exact=getattr(service, f"{kind}_exact"),
            name=getattr(service, f"{kind}_name"),
        )
    return lookups

add_child_routes(router, "authors", AuthorBase, 2, _children("authors"), with_add_remove=False)
add_child_routes(router, "series", SeriesBase, 1, _children("series"), with_add_remove=False)
add_child_routes(router, "stories", StoryBase, 1, _children("stories"), with_add_remove=False)
add_child_routes(router, "volumes", VolumeBase, 1, _children("volumes"), with_add_remove=False)
