"""Shared test fixtures."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from itertools import count
from pathlib import Path

import pytest

from progress_gallery.adapters.json_file_store import KeyValueStore
from progress_gallery.config import Settings
from progress_gallery.containers import AppContainer
from progress_gallery.domain.photos import Photo, PhotoHandle
from progress_gallery.services.gallery import GalleryManager, PhotoSource, ShareTarget
from progress_gallery.services.photo_store import GalleryStorage, PhotoStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    items: dict[str, str] = field(default_factory=dict)
    fail_writes: bool = False

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.items[key] = value


@dataclass
class InMemoryGalleryStorage(GalleryStorage):
    """In-memory gallery storage that records every save."""

    photos: list[Photo] = field(default_factory=list)
    saves: list[list[Photo]] = field(default_factory=list)
    fail_saves: bool = False

    def load(self) -> list[Photo]:
        return list(self.photos)

    def save(self, photos: Sequence[Photo]) -> bool:
        if self.fail_saves:
            return False
        self.photos = list(photos)
        self.saves.append(list(photos))
        return True


@dataclass
class FakePhotoSource(PhotoSource):
    """Photo source returning a fixed list of handles."""

    handles: list[PhotoHandle] | None = None
    requested: list[int] = field(default_factory=list)

    async def pick_photos(self, limit: int) -> list[PhotoHandle] | None:
        self.requested.append(limit)
        return self.handles


@dataclass
class FakeShareTarget(ShareTarget):
    """Share target that records messages."""

    messages: list[str] = field(default_factory=list)

    async def share(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class SteppingClock:
    """Clock advancing one day per call."""

    current: datetime = datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        value = self.current
        self.current = value + timedelta(days=1)
        return value


def sequential_ids(prefix: str = "photo") -> Callable[[], str]:
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def make_photo(photo_id: str, day: int = 1) -> Photo:
    return Photo(
        id=photo_id,
        uri=f"file:///photos/{photo_id}.jpg",
        created_at=datetime(2024, 1, day, tzinfo=UTC),
    )


def handles(*uris: str) -> list[PhotoHandle]:
    return [PhotoHandle(uri=uri) for uri in uris]


def build_manager(
    photos: list[Photo] | None = None, **kwargs: object
) -> tuple[GalleryManager, InMemoryGalleryStorage]:
    storage = InMemoryGalleryStorage(photos=list(photos or []))
    store = PhotoStore(storage, clock=SteppingClock(), id_factory=sequential_ids())
    manager = GalleryManager(store=store, **kwargs)
    manager.init()
    return manager, storage


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        gallery_storage_path=tmp_path / "gallery.json",
        share_title="Boost Roo",
    )


@pytest.fixture
def storage() -> InMemoryGalleryStorage:
    return InMemoryGalleryStorage()


@pytest.fixture
def container(settings: Settings, storage: InMemoryGalleryStorage) -> AppContainer:
    store = PhotoStore(storage, clock=SteppingClock(), id_factory=sequential_ids())
    gallery_manager = GalleryManager(
        store=store,
        share_title=settings.share_title,
        selection_limit=settings.gallery_selection_limit,
    )
    gallery_manager.init()

    async def close_resources() -> None:
        gallery_manager.teardown()

    return AppContainer(
        settings=settings,
        gallery_manager=gallery_manager,
        close_resources=close_resources,
    )
