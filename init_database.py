"""Create the movies schema and insert sample data"""
import logging

from config import Config
from database import db
from database.models import Movie  # noqa: F401  registers the table on Base
from database.sample_movies import seed_movies

logger = logging.getLogger(__name__)


def init_database():
    logger.info("Creating schema on %s", db.engine.url.render_as_string(hide_password=True))
    db.create_schema()

    session = db.SessionLocal()
    try:
        inserted = seed_movies(session)
    finally:
        session.close()

    logger.info("Database initialization complete (%d movies inserted)", inserted)
    return inserted


if __name__ == '__main__':
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    init_database()
