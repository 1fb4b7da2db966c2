"""Rendering snapshot of the gallery."""

from dataclasses import dataclass

from progress_gallery.domain.photos import CompareSelection, ComparePair, Photo
from progress_gallery.domain.picker import PickerSession


@dataclass(frozen=True)
class GallerySnapshot:
    """Immutable view of the gallery handed to the presentation layer."""

    collection: tuple[Photo, ...]
    selection: CompareSelection
    compare: ComparePair
    compare_label: str
    picker: PickerSession | None
    disabled_photo_id: str | None
