"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from progress_gallery.adapters.gallery_storage import KeyValueGalleryStorage
from progress_gallery.adapters.json_file_store import JsonFileKeyValueStore
from progress_gallery.config import Settings
from progress_gallery.services.gallery import GalleryManager
from progress_gallery.services.photo_store import PhotoStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gallery_manager: GalleryManager
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = KeyValueGalleryStorage(
        store=JsonFileKeyValueStore(resolved_settings.gallery_storage_path),
        key=resolved_settings.gallery_storage_key,
    )
    gallery_manager = GalleryManager(
        store=PhotoStore(storage),
        share_title=resolved_settings.share_title,
        selection_limit=resolved_settings.gallery_selection_limit,
    )
    gallery_manager.init()

    async def close_resources() -> None:
        gallery_manager.teardown()

    return AppContainer(
        settings=resolved_settings,
        gallery_manager=gallery_manager,
        close_resources=close_resources,
    )
