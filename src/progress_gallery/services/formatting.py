"""Display labels for gallery photos."""

from datetime import datetime

from progress_gallery.domain.photos import ComparePair

_EMPTY_RANGE_LABEL = "Pick two photos"
_EMPTY_SHARE_LABEL = "Progress photos"


def format_photo_date(value: datetime) -> str:
    """Format a photo timestamp as a caption, e.g. ``05 Mar 2024``."""
    return value.strftime("%d %b %Y")


def compare_range_label(pair: ComparePair) -> str:
    """Describe the date range covered by the comparison."""
    if pair.left is None or pair.right is None:
        return _EMPTY_RANGE_LABEL
    return (
        f"{format_photo_date(pair.left.created_at)} - "
        f"{format_photo_date(pair.right.created_at)}"
    )


def share_message(pair: ComparePair, title: str) -> str:
    """Build the text payload shared for a comparison."""
    if pair.left is None or pair.right is None:
        return f"{title} — {_EMPTY_SHARE_LABEL}"
    return f"{title} — {compare_range_label(pair)}"
