"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from progress_gallery.api.gallery_models import (
    AddPhotosRequest,
    ComparePickerRequest,
    GalleryOut,
    GridPickerRequest,
    ResolvePickerRequest,
    ShareOut,
)
from progress_gallery.app_logging import configure_logging
from progress_gallery.containers import AppContainer
from progress_gallery.domain.photos import PhotoHandle
from progress_gallery.services.gallery import GalleryManager


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to release gallery resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/gallery")
    async def gallery(request: Request) -> GalleryOut:
        """Return the current gallery render state."""
        return GalleryOut.from_snapshot(_manager(request).snapshot())

    @app.post("/gallery/photos")
    async def add_photos(body: AddPhotosRequest, request: Request) -> GalleryOut:
        """Add a batch of photos in front of the grid."""
        handles = [PhotoHandle(uri=photo.uri) for photo in body.photos]
        return GalleryOut.from_snapshot(_manager(request).add_photos(handles))

    @app.delete("/gallery/photos/{photo_id}")
    async def delete_photo(photo_id: str, request: Request) -> GalleryOut:
        """Delete a photo; unknown ids leave the gallery unchanged."""
        return GalleryOut.from_snapshot(_manager(request).delete_photo(photo_id))

    @app.post("/gallery/picker/grid")
    async def open_grid_picker(body: GridPickerRequest, request: Request) -> GalleryOut:
        """Open the picker to replace a grid position."""
        return GalleryOut.from_snapshot(_manager(request).open_grid_picker(body.index))

    @app.post("/gallery/picker/compare")
    async def open_compare_picker(
        body: ComparePickerRequest, request: Request
    ) -> GalleryOut:
        """Open the picker for one side of the comparison."""
        return GalleryOut.from_snapshot(
            _manager(request).open_compare_picker(body.side)
        )

    @app.post("/gallery/picker/resolve")
    async def resolve_picker(
        body: ResolvePickerRequest, request: Request
    ) -> GalleryOut:
        """Apply the chosen photo and close the picker."""
        return GalleryOut.from_snapshot(
            _manager(request).resolve_picker(body.photo_id)
        )

    @app.post("/gallery/picker/dismiss")
    async def dismiss_picker(request: Request) -> GalleryOut:
        """Close the picker without changes."""
        return GalleryOut.from_snapshot(_manager(request).dismiss_picker())

    @app.get("/gallery/share")
    async def share(request: Request) -> ShareOut:
        """Return the text to share for the current comparison."""
        return ShareOut(message=_manager(request).share_message())

    return app


def _manager(request: Request) -> GalleryManager:
    container: AppContainer = request.app.state.container
    return container.gallery_manager
