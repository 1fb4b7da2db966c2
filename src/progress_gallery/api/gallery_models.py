"""Pydantic models for the gallery screen API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from progress_gallery.domain.gallery import GallerySnapshot
from progress_gallery.domain.photos import Photo
from progress_gallery.services.formatting import format_photo_date


class PhotoHandleIn(BaseModel):
    """Image handle produced by the client's photo source."""

    uri: str


class AddPhotosRequest(BaseModel):
    """Batch of photos to add to the gallery."""

    photos: list[PhotoHandleIn]


class GridPickerRequest(BaseModel):
    """Open the picker for a grid position."""

    index: int = Field(ge=0)


class ComparePickerRequest(BaseModel):
    """Open the picker for a comparison side."""

    side: Literal["left", "right"]


class ResolvePickerRequest(BaseModel):
    """Photo chosen in the open picker."""

    photo_id: str


class PhotoOut(BaseModel):
    """Photo as rendered in the grid."""

    id: str
    uri: str
    created_at: datetime
    caption: str

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoOut":
        return cls(
            id=photo.id,
            uri=photo.uri,
            created_at=photo.created_at,
            caption=format_photo_date(photo.created_at),
        )


class SelectionOut(BaseModel):
    """Ids selected for the comparison."""

    left_id: str | None
    right_id: str | None


class PickerOut(BaseModel):
    """Open picker state."""

    mode: Literal["grid-replace", "compare-pick"]
    target_index: int | None
    target_id: str | None
    side: Literal["left", "right"] | None


class GalleryOut(BaseModel):
    """Full render state for the gallery screen."""

    collection: list[PhotoOut]
    selection: SelectionOut
    compare_left: PhotoOut | None
    compare_right: PhotoOut | None
    compare_label: str
    picker: PickerOut | None
    disabled_photo_id: str | None

    @classmethod
    def from_snapshot(cls, snapshot: GallerySnapshot) -> "GalleryOut":
        picker = snapshot.picker
        return cls(
            collection=[PhotoOut.from_photo(photo) for photo in snapshot.collection],
            selection=SelectionOut(
                left_id=snapshot.selection.left_id,
                right_id=snapshot.selection.right_id,
            ),
            compare_left=(
                PhotoOut.from_photo(snapshot.compare.left)
                if snapshot.compare.left
                else None
            ),
            compare_right=(
                PhotoOut.from_photo(snapshot.compare.right)
                if snapshot.compare.right
                else None
            ),
            compare_label=snapshot.compare_label,
            picker=(
                PickerOut(
                    mode=picker.mode,
                    target_index=picker.target_index,
                    target_id=picker.target_id,
                    side=picker.side,
                )
                if picker
                else None
            ),
            disabled_photo_id=snapshot.disabled_photo_id,
        )


class ShareOut(BaseModel):
    """Text payload for the platform share sheet."""

    message: str
