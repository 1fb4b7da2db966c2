"""ASGI entrypoint serving the gallery screen API.

The gallery file is loaded once here; ``uvicorn`` or any ASGI server then
drives the lifespan, which flushes unsaved state on shutdown.
"""

from progress_gallery.api.app import create_app
from progress_gallery.app_logging import configure_logging
from progress_gallery.config import Settings
from progress_gallery.containers import build_container

settings = Settings()
configure_logging(settings.log_level)
app = create_app(build_container(settings))
