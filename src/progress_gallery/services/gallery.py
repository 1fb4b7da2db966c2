"""Gallery screen state: collection, comparison selection and picker."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol

from progress_gallery.domain.gallery import GallerySnapshot
from progress_gallery.domain.photos import CompareSelection, CompareSide, PhotoHandle
from progress_gallery.domain.picker import PickerSession
from progress_gallery.services.formatting import (
    compare_range_label,
    share_message as build_share_message,
)
from progress_gallery.services.photo_store import PhotoStore
from progress_gallery.services.picker import (
    disabled_photo_id,
    open_for_compare_slot,
    open_for_grid,
)
from progress_gallery.services.selection import (
    default_selection,
    derive,
    repair_on_removal,
    select_after_add,
    set_slot,
)

logger = logging.getLogger(__name__)


class PhotoSource(Protocol):
    """Interface for choosing images to import."""

    async def pick_photos(self, limit: int) -> list[PhotoHandle] | None:
        """Return up to ``limit`` handles, or None if the user cancelled."""


class ShareTarget(Protocol):
    """Interface for the platform share sheet."""

    async def share(self, message: str) -> None:
        """Share a plain text payload."""


@dataclass
class GalleryManager:
    """Owns the gallery state for one screen lifetime.

    Every command runs to completion against in-memory state and returns a
    fresh snapshot. Stale ids and indices are ignored rather than raised.
    """

    store: PhotoStore
    share_title: str = "Boost Roo"
    selection_limit: int = 4
    photo_source: PhotoSource | None = None
    share_target: ShareTarget | None = None
    selection: CompareSelection = field(default_factory=CompareSelection)
    picker: PickerSession | None = None
    _initialized: bool = field(default=False, init=False, repr=False)

    def init(self) -> GallerySnapshot:
        """Load the persisted collection once and seed the comparison."""
        if not self._initialized:
            collection = self.store.load()
            self.selection = default_selection(collection)
            self.picker = None
            self._initialized = True
        return self.snapshot()

    def teardown(self) -> bool:
        """Flush unsaved state; returns False if the write still fails."""
        saved = self.store.flush()
        if not saved:
            logger.warning("Gallery state could not be flushed on teardown")
        return saved

    def snapshot(self) -> GallerySnapshot:
        """Return everything the screen needs to render."""
        collection = self.store.photos
        pair = derive(collection, self.selection)
        live_picker = self._live_picker()
        return GallerySnapshot(
            collection=collection,
            selection=self.selection,
            compare=pair,
            compare_label=compare_range_label(pair),
            picker=live_picker,
            disabled_photo_id=disabled_photo_id(live_picker),
        )

    def add_photos(self, handles: Sequence[PhotoHandle]) -> GallerySnapshot:
        """Add a batch of photos in front of the collection."""
        if not handles:
            return self.snapshot()
        collection = self.store.add_batch(handles)
        self.selection = select_after_add(collection, self.selection)
        logger.info("Added %d photos to the gallery", len(handles))
        return self.snapshot()

    async def add_from_source(self) -> GallerySnapshot:
        """Import photos from the configured source."""
        if self.photo_source is None:
            return self.snapshot()
        try:
            handles = await self.photo_source.pick_photos(self.selection_limit)
        except Exception:
            logger.exception("Photo source failed")
            return self.snapshot()
        if not handles:
            return self.snapshot()
        return self.add_photos(handles[: self.selection_limit])

    def delete_photo(self, photo_id: str) -> GallerySnapshot:
        """Delete a photo and repair the comparison if it pointed at it."""
        if self.store.index_of(photo_id) is None:
            return self.snapshot()
        collection = self.store.remove(photo_id)
        self.selection = repair_on_removal(photo_id, collection, self.selection)
        logger.info("Deleted photo %s", photo_id)
        return self.snapshot()

    def open_grid_picker(self, index: int) -> GallerySnapshot:
        """Open the picker to replace the photo at a grid position."""
        session = open_for_grid(self.store.photos, index)
        if session is None:
            logger.debug("Ignoring picker for missing grid index %s", index)
        self.picker = session
        return self.snapshot()

    def open_compare_picker(self, side: CompareSide) -> GallerySnapshot:
        """Open the picker to choose one side of the comparison."""
        self.picker = open_for_compare_slot(side)
        return self.snapshot()

    def resolve_picker(self, chosen_id: str) -> GallerySnapshot:
        """Apply the photo chosen in the picker and close it."""
        session = self.picker
        self.picker = None
        if session is None:
            return self.snapshot()
        if session.mode == "grid-replace" and session.target_id is not None:
            target_index = self.store.index_of(session.target_id)
            if target_index is None:
                logger.debug("Picker target %s vanished", session.target_id)
                return self.snapshot()
            self.store.replace_by_swap(target_index, chosen_id)
        elif session.mode == "compare-pick" and session.side is not None:
            if self.store.index_of(chosen_id) is None:
                logger.debug("Ignoring pick of missing photo %s", chosen_id)
                return self.snapshot()
            self.selection = set_slot(self.selection, session.side, chosen_id)
        return self.snapshot()

    def dismiss_picker(self) -> GallerySnapshot:
        """Close the picker without changing anything."""
        self.picker = None
        return self.snapshot()

    def _live_picker(self) -> PickerSession | None:
        session = self.picker
        if session is None or session.target_id is None:
            return session
        return replace(session, target_index=self.store.index_of(session.target_id))

    def share_message(self) -> str:
        """Return the text shared for the current comparison."""
        pair = derive(self.store.photos, self.selection)
        return build_share_message(pair, self.share_title)

    async def share_comparison(self) -> bool:
        """Hand the comparison text to the share target."""
        if self.share_target is None:
            return False
        try:
            await self.share_target.share(self.share_message())
        except Exception:
            logger.exception("Failed to share comparison")
            return False
        return True
