"""Entry point for serving the todo API."""

import logging
import sys

from todo_store.logging_utils import configure_logging
from todo_store.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting on %s:%s", settings.host, settings.port)
    try:
        uvicorn.run(
            "todo_store.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutdown requested...")
        sys.exit(0)


if __name__ == "__main__":
    main()
