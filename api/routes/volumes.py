# api/routes/volumes.py
from fastapi import APIRouter

from core.services import VolumeService
from api.schemas import AuthorBase, StoryBase, VolumeCreate, VolumeSchema, VolumeUpdate
from .common import add_child_routes, add_crud_routes

router = APIRouter(prefix="/volumes", tags=["volumes"])

add_crud_routes(router, VolumeService, VolumeSchema, VolumeCreate, VolumeUpdate)
add_child_routes(router, "authors", AuthorBase, 2, lambda db: VolumeService(db).authors)
add_child_routes(router, "stories", StoryBase, 1, lambda db: VolumeService(db).stories)
