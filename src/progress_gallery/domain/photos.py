"""Domain models for the photo gallery."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

CompareSide = Literal["left", "right"]


@dataclass(frozen=True)
class PhotoHandle:
    """Opaque reference to image data yielded by a photo source."""

    uri: str


@dataclass(frozen=True)
class Photo:
    """Represents a photo stored in the gallery."""

    id: str
    uri: str
    created_at: datetime


@dataclass(frozen=True)
class CompareSelection:
    """Ids of the photos shown in the before/after comparison."""

    left_id: str | None = None
    right_id: str | None = None


@dataclass(frozen=True)
class ComparePair:
    """Photos resolved for the comparison view."""

    left: Photo | None
    right: Photo | None
