import uvicorn

from jqlens.core.config import get_settings
from jqlens.core.logging_setup import configure_logging


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level).info("Server running on http://localhost:%s", settings.port)
    uvicorn.run(
        "jqlens.main:app",
        host=settings.app_host,
        port=settings.port,
        reload=settings.app_reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
