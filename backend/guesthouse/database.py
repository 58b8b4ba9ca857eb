"""Persistence adapter: engine, bounded connection pool and session factory."""

import logging
import socket
from typing import Annotated

from fastapi import Path, Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from guesthouse.config import Settings
from guesthouse.errors import StorageError

logger = logging.getLogger(__name__)

Base = declarative_base()

# largest id any supported store can bind
MAX_ID = 2**63 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_ID)]


def resolve_host(host: str) -> str:
    """Look up an IPv4 address for host so the driver connects to a fixed address"""
    try:
        address = socket.gethostbyname(host)
    except OSError as e:
        raise StorageError(f"Could not resolve database host {host}") from e
    logger.info("Resolved database host %s to %s", host, address)
    return address


class Database:
    """Owns the engine for one application; open once, close on shutdown"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine = None
        self._sessionmaker = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def _engine_options(self, url) -> dict:
        if url.get_backend_name() == "sqlite":
            options = {"connect_args": {"check_same_thread": False}}
            if url.database in (None, "", ":memory:"):
                # one shared connection, otherwise every checkout sees an empty database
                options["poolclass"] = StaticPool
            else:
                options.update(
                    pool_size=self.settings.DB_POOL_SIZE,
                    max_overflow=0,
                    pool_timeout=self.settings.DB_POOL_TIMEOUT,
                )
            return options
        return {
            "pool_size": self.settings.DB_POOL_SIZE,
            "max_overflow": 0,
            "pool_timeout": self.settings.DB_POOL_TIMEOUT,
            "pool_pre_ping": True,
        }

    def open(self) -> None:
        if self.is_open:
            return
        host = None
        if self.settings.DB_RESOLVE_HOST and self.settings.DB_HOST and not self.settings.DATABASE_URL:
            host = resolve_host(self.settings.DB_HOST)
        url = self.settings.database_url(host=host)
        self.engine = create_engine(url, **self._engine_options(url))
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info(
            "Opened %s database pool (size %s)",
            url.get_backend_name(),
            self.settings.DB_POOL_SIZE,
        )

    def healthcheck(self) -> None:
        if not self.is_open:
            raise StorageError("Database is not open")
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error("Database healthcheck failed: %s", e)
            raise StorageError("Database is unreachable") from e

    def create_schema(self) -> None:
        # registers every table on Base.metadata
        import guesthouse.models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.exception("Could not create database schema")
            raise StorageError() from e

    def session(self) -> Session:
        if not self.is_open:
            raise StorageError("Database is not open")
        return self._sessionmaker()

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            logger.info("Closed database pool")
        self.engine = None
        self._sessionmaker = None


def get_db(request: Request):
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
