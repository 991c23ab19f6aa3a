"""
Database initialization.

Creates all tables and seeds the built-in food catalog.
"""

import logging

from sqlmodel import Session, SQLModel

from app.db.session import engine
from app.routinize.food_catalog import seed_food_catalog

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds the Spanish food catalog (skipped if already present)
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created")

    with Session(engine) as session:
        inserted = seed_food_catalog(session)
    logger.info("Database initialization complete (%d foods seeded)", inserted)


if __name__ == "__main__":
    from app.core.logging_config import configure_logging

    configure_logging()
    init_db()
