import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from jqlens.api.v1.router import api_router
from jqlens.core.config import Settings, get_settings
from jqlens.core.logging_setup import configure_logging
from jqlens.storage.temp_store import TempFileStore

logger = logging.getLogger("jqlens")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Fails start-up if the upload directory cannot be created.
    upload_dir = TempFileStore(settings.upload_dir).ensure_directory()
    logger.debug("Upload directory ready at %s", upload_dir)

    app = FastAPI(title=settings.app_name)
    app.dependency_overrides[get_settings] = lambda: settings
    app.include_router(api_router)

    static_dir = Path(settings.static_dir)
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")
    else:
        logger.warning("Static directory %s not found; assets will not be served", static_dir)

    return app


app = create_app()
