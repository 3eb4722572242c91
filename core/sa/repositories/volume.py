# core/sa/repositories/volume.py
from core.sa.models import AuthorVolume, Volume, VolumeStory
from core.sa.validators import library_exists, library_fixed_while_linked, required, unique_name, valid_media
from .base import EntityRepository

class VolumeRepository(EntityRepository):
    """Repository for managing Volume entities (physical or electronic copies)."""

    model = Volume
    kind = "Volume"
    fields = ("isbn", "library_id", "location", "media", "name", "notes", "read")
    order = ("library_id", "name")
    validators = (
        required("library_id", "name"),
        library_exists,
        library_fixed_while_linked(Volume, [(AuthorVolume, "volume_id"), (VolumeStory, "volume_id")]),
        valid_media,
        unique_name(Volume, ("library_id", "name")),
    )
