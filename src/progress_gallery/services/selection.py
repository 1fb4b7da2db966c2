"""Before/after comparison selection policy.

The selection only ever holds photo ids. These functions are pure: they take
the collection as it is after a change and return the selection that keeps
every non-null id pointing at a photo in that collection.
"""

from collections.abc import Sequence
from dataclasses import replace

from progress_gallery.domain.photos import (
    CompareSelection,
    ComparePair,
    CompareSide,
    Photo,
)


def _first_id(collection: Sequence[Photo]) -> str | None:
    return collection[0].id if collection else None


def _second_id(collection: Sequence[Photo]) -> str | None:
    if len(collection) > 1:
        return collection[1].id
    return _first_id(collection)


def default_selection(collection: Sequence[Photo]) -> CompareSelection:
    """Return the first photo on the left and the second (or first) on the right."""
    return CompareSelection(
        left_id=_first_id(collection),
        right_id=_second_id(collection),
    )


def select_after_add(
    collection: Sequence[Photo], selection: CompareSelection
) -> CompareSelection:
    """Seed an empty left slot from a collection that just received a batch."""
    if selection.left_id is not None:
        return selection
    return default_selection(collection)


def repair_on_removal(
    removed_id: str, collection: Sequence[Photo], selection: CompareSelection
) -> CompareSelection:
    """Reassign any slot that referenced the removed photo."""
    left_id = selection.left_id
    right_id = selection.right_id
    if left_id == removed_id:
        left_id = _first_id(collection)
    if right_id == removed_id:
        right_id = _second_id(collection)
    return CompareSelection(left_id=left_id, right_id=right_id)


def set_slot(
    selection: CompareSelection, side: CompareSide, photo_id: str
) -> CompareSelection:
    """Point one side of the selection at a photo."""
    if side == "left":
        return replace(selection, left_id=photo_id)
    if side == "right":
        return replace(selection, right_id=photo_id)
    raise ValueError(f"Unknown compare side: {side!r}")


def derive(collection: Sequence[Photo], selection: CompareSelection) -> ComparePair:
    """Resolve the selected ids to photos; missing ids resolve to None."""
    by_id = {photo.id: photo for photo in collection}
    return ComparePair(
        left=by_id.get(selection.left_id) if selection.left_id else None,
        right=by_id.get(selection.right_id) if selection.right_id else None,
    )


def is_consistent(collection: Sequence[Photo], selection: CompareSelection) -> bool:
    """Return True when every non-null slot references a photo in the collection."""
    ids = {photo.id for photo in collection}
    return all(
        slot is None or slot in ids for slot in (selection.left_id, selection.right_id)
    )
