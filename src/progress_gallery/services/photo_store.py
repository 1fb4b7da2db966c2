"""Authoritative ordered photo collection."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from progress_gallery.domain.photos import Photo, PhotoHandle

logger = logging.getLogger(__name__)


class GalleryStorage(Protocol):
    """Persistence interface for the photo collection."""

    def load(self) -> list[Photo]:
        """Return the persisted collection, or an empty list if unavailable."""

    def save(self, photos: Sequence[Photo]) -> bool:
        """Overwrite the persisted collection and report whether it landed."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def _new_photo_id() -> str:
    return str(uuid4())


@dataclass
class PhotoStore:
    """Ordered photo collection with the only mutation primitives."""

    storage: GalleryStorage
    clock: Callable[[], datetime] = _utcnow
    id_factory: Callable[[], str] = _new_photo_id
    last_save_ok: bool = True
    _photos: list[Photo] = field(default_factory=list, init=False, repr=False)

    @property
    def photos(self) -> tuple[Photo, ...]:
        """Return the current collection, most recent batch first."""
        return tuple(self._photos)

    def load(self) -> tuple[Photo, ...]:
        """Replace in-memory state with the persisted collection."""
        self._photos = list(self.storage.load())
        logger.info("Loaded %d gallery photos", len(self._photos))
        return self.photos

    def index_of(self, photo_id: str) -> int | None:
        """Return the position of a photo, if present."""
        for index, photo in enumerate(self._photos):
            if photo.id == photo_id:
                return index
        return None

    def get(self, photo_id: str) -> Photo | None:
        """Return a photo by id, if present."""
        index = self.index_of(photo_id)
        return self._photos[index] if index is not None else None

    def add_batch(self, handles: Sequence[PhotoHandle]) -> tuple[Photo, ...]:
        """Prepend new photos for the handles, keeping their relative order."""
        if not handles:
            return self.photos
        created_at = self.clock()
        taken = {photo.id for photo in self._photos}
        batch: list[Photo] = []
        for handle in handles:
            photo_id = self.id_factory()
            while photo_id in taken:
                photo_id = self.id_factory()
            taken.add(photo_id)
            batch.append(Photo(id=photo_id, uri=handle.uri, created_at=created_at))
        self._photos = batch + self._photos
        self._persist()
        return self.photos

    def replace_by_swap(self, target_index: int, source_id: str) -> tuple[Photo, ...]:
        """Exchange the photo at target_index with the photo source_id."""
        source_index = self.index_of(source_id)
        if source_index is None or not 0 <= target_index < len(self._photos):
            logger.debug(
                "Ignoring swap of index %s with unknown photo %s",
                target_index,
                source_id,
            )
            return self.photos
        if source_index == target_index:
            return self.photos
        photos = self._photos
        photos[target_index], photos[source_index] = (
            photos[source_index],
            photos[target_index],
        )
        self._persist()
        return self.photos

    def remove(self, photo_id: str) -> tuple[Photo, ...]:
        """Delete a photo by id; unknown ids are ignored."""
        index = self.index_of(photo_id)
        if index is None:
            logger.debug("Ignoring removal of unknown photo %s", photo_id)
            return self.photos
        del self._photos[index]
        self._persist()
        return self.photos

    def flush(self) -> bool:
        """Write the collection again if the last write failed."""
        if self.last_save_ok:
            return True
        self._persist()
        return self.last_save_ok

    def _persist(self) -> None:
        self.last_save_ok = self.storage.save(self.photos)
