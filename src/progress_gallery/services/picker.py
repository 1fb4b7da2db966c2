"""Transitions for the choose-from-existing picker.

A closed picker is represented by ``None``.
"""

from collections.abc import Sequence

from progress_gallery.domain.photos import CompareSide, Photo
from progress_gallery.domain.picker import PickerSession

_SIDES = {"left", "right"}


def open_for_grid(collection: Sequence[Photo], index: int) -> PickerSession | None:
    """Open the picker to replace a grid position, or stay closed if it is gone."""
    if not 0 <= index < len(collection):
        return None
    return PickerSession(
        mode="grid-replace",
        target_index=index,
        target_id=collection[index].id,
    )


def open_for_compare_slot(side: CompareSide) -> PickerSession:
    """Open the picker to choose the photo for one side of the comparison."""
    if side not in _SIDES:
        raise ValueError(f"Unknown compare side: {side!r}")
    return PickerSession(mode="compare-pick", side=side)


def disabled_photo_id(session: PickerSession | None) -> str | None:
    """Return the photo the picker must not offer (the grid target itself)."""
    if session is None or session.target_index is None:
        return None
    return session.target_id
