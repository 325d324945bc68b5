"""
Database utilities and SQLAlchemy session management.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

Base = declarative_base()

logger = logging.getLogger(__name__)


def build_engine(config) -> Engine:
    """
    Create the pooled engine for the configured store.
    """
    url = config.DATABASE_URL

    if url.startswith("sqlite"):
        # Required for SQLite when the engine is shared across request threads.
        return create_engine(
            url,
            future=True,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    connect_args = {}
    if url.startswith("postgresql"):
        # PostgreSQL connection timeout (in seconds)
        connect_args["connect_timeout"] = config.DB_CONNECT_TIMEOUT

    return create_engine(
        url,
        poolclass=QueuePool,
        pool_size=config.DB_POOL_SIZE,
        pool_pre_ping=True,
        pool_recycle=config.DB_POOL_RECYCLE,
        pool_timeout=config.DB_POOL_TIMEOUT,
        future=True,
        echo=False,
        connect_args=connect_args,
    )


class Database:
    """
    Process-scoped handle on the store: one engine and its session factory.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(
            bind=engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            future=True,
        )

    @classmethod
    def from_config(cls, config) -> "Database":
        return cls(build_engine(config))

    def init_db(self) -> None:
        """
        Import models and create missing tables. Existing tables are left untouched.
        """
        from app import models  # noqa: F401  (side-effect import)
        Base.metadata.create_all(bind=self.engine, checkfirst=True)
        logger.info("Database initialized")

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager that yields a SQLAlchemy session and guarantees cleanup.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
