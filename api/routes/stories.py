# api/routes/stories.py
from fastapi import APIRouter

from core.services import StoryService
from api.schemas import AuthorBase, SeriesBase, StoryCreate, StorySchema, StoryUpdate, VolumeBase
from .common import add_child_routes, add_crud_routes

router = APIRouter(prefix="/stories", tags=["stories"])

add_crud_routes(router, StoryService, StorySchema, StoryCreate, StoryUpdate)
add_child_routes(router, "authors", AuthorBase, 2, lambda db: StoryService(db).authors)
add_child_routes(router, "series", SeriesBase, 1, lambda db: StoryService(db).series, with_ordinal=True)
add_child_routes(router, "volumes", VolumeBase, 1, lambda db: StoryService(db).volumes)
