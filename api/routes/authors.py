# api/routes/authors.py
from fastapi import APIRouter

from core.services import AuthorService
from api.schemas import AuthorCreate, AuthorSchema, AuthorUpdate, SeriesBase, StoryBase, VolumeBase
from .common import add_child_routes, add_crud_routes

router = APIRouter(prefix="/authors", tags=["authors"])

add_crud_routes(router, AuthorService, AuthorSchema, AuthorCreate, AuthorUpdate)
add_child_routes(router, "series", SeriesBase, 1, lambda db: AuthorService(db).series)
add_child_routes(router, "stories", StoryBase, 1, lambda db: AuthorService(db).stories)
add_child_routes(router, "volumes", VolumeBase, 1, lambda db: AuthorService(db).volumes)
