# api/routes/devmode.py
import logging
import os

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from core.sa.database import get_db
from core.services import CatalogImporter, resync
from api.schemas import ImportResults

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/devmode", tags=["devmode"])

DEFAULT_LIBRARY = "Personal Library"

@router.post("/import", response_model=ImportResults)
def import_catalog(
    body: str = Body(..., media_type="text/csv", description="Catalog spreadsheet as CSV"),
    library: str = Query(None, description="Name of the Library to load (created if missing)"),
    db: Session = Depends(get_db)
):
    """
    Import catalog rows into a single Library.

    Rows are processed in order. Authors, stories, volumes and series are
    found by name or created, and their associations added unless they
    already exist, so re-importing the same file changes nothing.
    """
    name = library or os.getenv("BOOKCASE_LIBRARY", DEFAULT_LIBRARY)
    importer = CatalogImporter.for_library(db, name)
    results = importer.import_csv(body)
    logger.info("Imported %d rows into library '%s'", results["countRows"], name)
    return ImportResults(**results)

@router.post("/resync")
def resync_database(db: Session = Depends(get_db)):
    """Drop and recreate all tables. Every Library and its catalog is lost."""
    return {"message": resync(db)}
