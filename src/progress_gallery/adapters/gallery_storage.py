"""Gallery persistence on top of a key-value slot."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from progress_gallery.adapters.json_file_store import KeyValueStore
from progress_gallery.domain.photos import Photo
from progress_gallery.services.photo_store import GalleryStorage

logger = logging.getLogger(__name__)

DEFAULT_GALLERY_KEY = "gallery:photos"


class StoredPhoto(BaseModel):
    """Persisted representation of a gallery photo."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    uri: str
    created_at: datetime = Field(alias="createdAt")


_STORED_PHOTOS = TypeAdapter(list[StoredPhoto])


@dataclass
class KeyValueGalleryStorage(GalleryStorage):
    """Stores the whole collection as one JSON array under a single key."""

    store: KeyValueStore
    key: str = DEFAULT_GALLERY_KEY

    def load(self) -> list[Photo]:
        """Return the stored collection; unreadable state loads as empty."""
        try:
            raw = self.store.get_item(self.key)
            if raw is None:
                return []
            stored = _STORED_PHOTOS.validate_json(raw)
        except (OSError, ValueError):
            logger.warning("Discarding unreadable gallery state", exc_info=True)
            return []
        photos: list[Photo] = []
        seen: set[str] = set()
        for item in stored:
            if item.id in seen:
                logger.warning("Dropping duplicate gallery photo %s", item.id)
                continue
            seen.add(item.id)
            photos.append(Photo(id=item.id, uri=item.uri, created_at=item.created_at))
        return photos

    def save(self, photos: Sequence[Photo]) -> bool:
        """Overwrite the stored collection; failures are logged, not raised."""
        payload = _STORED_PHOTOS.dump_json(
            [
                StoredPhoto(id=photo.id, uri=photo.uri, created_at=photo.created_at)
                for photo in photos
            ],
            by_alias=True,
        ).decode("utf-8")
        try:
            self.store.set_item(self.key, payload)
        except (OSError, ValueError):
            logger.exception("Failed to persist gallery state")
            return False
        return True
