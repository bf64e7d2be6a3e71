"""PostgreSQL engine and session factory."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings


def configure_sql_logging(debug: bool) -> None:
    """
    Log SQL statements through the standard logging tree when debug is on.

    Engine echo is left off: it attaches its own stdout handler, and stdout is
    reserved for script output.
    """
    if debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


configure_sql_logging(settings.DEBUG)

# Connections are opened lazily on first use of a session.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
