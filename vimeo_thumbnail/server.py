"""Process entry point: serve the app with uvicorn workers."""

import logging
from logging.config import dictConfig

import uvicorn

from vimeo_thumbnail.config import settings
from vimeo_thumbnail.logging_config import get_uvicorn_log_config

logger = logging.getLogger(__name__)


def run() -> None:
    """Start ``web_concurrency`` uvicorn workers listening on ``app_host:app_port``."""
    log_config = get_uvicorn_log_config(settings.log_level)
    dictConfig(log_config)
    logger.info(
        "Starting %d worker(s) on %s:%d",
        settings.web_concurrency,
        settings.app_host,
        settings.app_port,
    )
    uvicorn.run(
        "vimeo_thumbnail.main:app",
        host=settings.app_host,
        port=settings.app_port,
        workers=settings.web_concurrency,
        log_config=log_config,
    )


if __name__ == "__main__":
    run()
