import logging

from app.config import get_settings
from app.db.engine import get_engine
from app.db.schema import metadata
from app.observability import setup_logging

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    setup_logging(settings.log_level, "text")

    engine = get_engine()
    metadata.create_all(engine)
    logger.info("DB schema created.")

if __name__ == "__main__":
    main()
