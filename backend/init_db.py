"""
Initialize the TinyLink database.

Run this script once to create the links table ahead of the first start:
    python init_db.py
"""

import logging

from tinylink.config import settings
from tinylink.core.logging_config import setup_logging
from tinylink.database import engine, Base
from tinylink.models import Link  # noqa: F401  registers the table

logger = logging.getLogger("tinylink.init_db")


def init_database():
    """Create all database tables"""
    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    init_database()
    logger.info("Start the server with: uvicorn tinylink.main:app --reload")
