"""Database configuration and session management."""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
engine = create_engine(settings.database_url, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None, drop_existing: bool = False) -> None:
    """Initialize the database by creating all tables.

    With ``drop_existing`` the tables are dropped first, which wipes any
    stored ingredients and recipes.
    """
    # Import all models here so they are registered with Base.metadata
    from src import models  # noqa: F401

    bind = bind or engine
    if drop_existing:
        logger.info("Dropping existing tables")
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
