"""
Main application entry point.
"""

from skillswapper.api.app import create_app
from skillswapper.config.logging import configure_logging, get_logger
from skillswapper.config.settings import settings

configure_logging()
logger = get_logger(__name__)

app = create_app()


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    logger.info("Starting SkillSwapper API server", host=settings.API_HOST, port=settings.API_PORT)
    uvicorn.run(
        "skillswapper.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
