"""Domain models for the choose-from-existing picker."""

from dataclasses import dataclass
from typing import Literal

from progress_gallery.domain.photos import CompareSide

PickerMode = Literal["grid-replace", "compare-pick"]


@dataclass(frozen=True)
class PickerSession:
    """An open picker and the slot its choice will be routed to."""

    mode: PickerMode
    # None once the target photo has been deleted
    target_index: int | None = None
    target_id: str | None = None
    side: CompareSide | None = None
