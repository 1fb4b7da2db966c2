"""Tests for the choose-from-existing picker flow."""

import pytest

from progress_gallery.domain.photos import CompareSelection
from progress_gallery.domain.picker import PickerSession
from progress_gallery.services.picker import (
    disabled_photo_id,
    open_for_compare_slot,
    open_for_grid,
)
from progress_gallery.services.selection import is_consistent
from tests.conftest import build_manager, make_photo


def _ids(snapshot) -> list[str]:
    return [photo.id for photo in snapshot.collection]


def test_open_for_grid_captures_target_photo() -> None:
    photos = [make_photo("a"), make_photo("b")]

    session = open_for_grid(photos, 1)

    assert session == PickerSession(mode="grid-replace", target_index=1, target_id="b")
    assert disabled_photo_id(session) == "b"
    assert open_for_grid(photos, 2) is None
    assert open_for_grid(photos, -1) is None


def test_open_for_compare_slot_validates_side() -> None:
    session = open_for_compare_slot("right")

    assert session == PickerSession(mode="compare-pick", side="right")
    assert disabled_photo_id(session) is None
    with pytest.raises(ValueError):
        open_for_compare_slot("top")  # type: ignore[arg-type]


def test_grid_pick_swaps_positions_and_closes() -> None:
    manager, storage = build_manager([make_photo(pid) for pid in "abc"])

    opened = manager.open_grid_picker(0)
    assert opened.picker is not None
    assert opened.disabled_photo_id == "a"

    snapshot = manager.resolve_picker("c")

    assert _ids(snapshot) == ["c", "b", "a"]
    assert snapshot.picker is None
    assert snapshot.disabled_photo_id is None
    assert [photo.id for photo in storage.photos] == ["c", "b", "a"]


def test_grid_pick_of_target_itself_is_noop() -> None:
    manager, storage = build_manager([make_photo(pid) for pid in "ab"])

    manager.open_grid_picker(1)
    snapshot = manager.resolve_picker("b")

    assert _ids(snapshot) == ["a", "b"]
    assert snapshot.picker is None
    assert storage.saves == []


def test_grid_pick_follows_target_after_it_moved() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_grid_picker(1)
    manager.store.replace_by_swap(0, "b")
    snapshot = manager.resolve_picker("c")

    assert _ids(snapshot) == ["c", "a", "b"]


def test_grid_pick_for_deleted_target_is_dismissed() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_grid_picker(0)
    manager.delete_photo("a")
    snapshot = manager.resolve_picker("c")

    assert _ids(snapshot) == ["b", "c"]
    assert snapshot.picker is None


def test_grid_picker_for_missing_index_stays_closed() -> None:
    manager, _ = build_manager([make_photo("a")])

    snapshot = manager.open_grid_picker(3)

    assert snapshot.picker is None


def test_compare_pick_sets_requested_side() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_compare_picker("right")
    snapshot = manager.resolve_picker("c")

    assert snapshot.selection == CompareSelection("a", "c")
    assert snapshot.compare.right == make_photo("c")
    assert snapshot.picker is None

    manager.open_compare_picker("left")
    snapshot = manager.resolve_picker("b")
    assert snapshot.selection == CompareSelection("b", "c")


def test_dismiss_closes_without_changes() -> None:
    manager, storage = build_manager([make_photo(pid) for pid in "ab"])

    manager.open_compare_picker("left")
    snapshot = manager.dismiss_picker()

    assert snapshot.picker is None
    assert snapshot.selection == CompareSelection("a", "b")
    assert storage.saves == []


def test_resolve_without_open_picker_is_noop() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "ab"])

    snapshot = manager.resolve_picker("b")

    assert _ids(snapshot) == ["a", "b"]
    assert snapshot.selection == CompareSelection("a", "b")


def test_reopening_replaces_session() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "ab"])

    manager.open_grid_picker(0)
    snapshot = manager.open_compare_picker("left")

    assert snapshot.picker == PickerSession(mode="compare-pick", side="left")
    assert snapshot.disabled_photo_id is None


def test_compare_pick_of_deleted_photo_is_ignored() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_compare_picker("left")
    manager.delete_photo("c")
    snapshot = manager.resolve_picker("c")

    assert snapshot.selection == CompareSelection("a", "b")
    assert is_consistent(snapshot.collection, snapshot.selection)
    assert snapshot.picker is None


def test_compare_pick_of_unknown_id_is_ignored() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_compare_picker("right")
    snapshot = manager.resolve_picker("nope")

    assert snapshot.selection == CompareSelection("a", "b")
    assert snapshot.picker is None


def test_open_grid_picker_reports_current_target_position() -> None:
    manager, _ = build_manager([make_photo(pid) for pid in "abc"])

    manager.open_grid_picker(2)
    snapshot = manager.delete_photo("a")

    assert snapshot.picker is not None
    assert snapshot.picker.target_id == "c"
    assert snapshot.picker.target_index == 1

    snapshot = manager.delete_photo("c")
    assert snapshot.picker is not None
    assert snapshot.picker.target_index is None
    assert snapshot.disabled_photo_id is None
