import logging

from jobly.core.config import settings
from jobly.core.database import init_db
from jobly.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Configure logging and create the companies and jobs tables.
    """
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)

    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    logger.info("Initializing database...")
    init_db()
    logger.info("Database initialized successfully")


if __name__ == "__main__":
    main()
