"""Application entry point."""

import uvicorn

from classdoc.config import get_settings


def run() -> None:
    """Run the application using uvicorn."""
    settings = get_settings()

    uvicorn.run(
        "classdoc.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=settings.debug,
    )


# For direct execution
if __name__ == "__main__":
    run()
