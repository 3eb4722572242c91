# api/routes/series.py
from fastapi import APIRouter

from core.services import SeriesService
from api.schemas import AuthorBase, SeriesCreate, SeriesSchema, SeriesUpdate, StoryBase
from .common import add_child_routes, add_crud_routes

router = APIRouter(prefix="/series", tags=["series"])

add_crud_routes(router, SeriesService, SeriesSchema, SeriesCreate, SeriesUpdate)
add_child_routes(router, "authors", AuthorBase, 2, lambda db: SeriesService(db).authors)
add_child_routes(router, "stories", StoryBase, 1, lambda db: SeriesService(db).stories, with_ordinal=True)
