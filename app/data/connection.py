from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from data.models import Base

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@dataclass(frozen=True)
class Store:
    """
    Explicit handle on the relational store.
    Built once by the app (st.cache_resource) and passed down to views and services.
    """
    engine: Engine
    session_factory: sessionmaker

    @property
    def cache_key(self) -> str:
        # Identifies the store inside st.cache_data keys without hashing the engine
        return f"{self.engine.url.render_as_string(hide_password=True)}#{id(self.engine)}"

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def init_schema(self) -> None:
        Base.metadata.create_all(self.engine)

    def ping(self) -> dict:
        """Connection status for the admin settings tab"""
        try:
            with self.engine.connect() as conn:
                return {"status": "connected", "result": conn.execute(text("SELECT 1")).scalar()}
        except SQLAlchemyError as e:
            return {"status": "error", "error": str(e)}


def create_store(database_url: Optional[str], echo: bool = False) -> Optional[Store]:
    """
    Returns None when no URL is configured: database features are disabled and
    the service layer serves fallback data.
    """
    if not database_url:
        logger.warning("DATABASE_URL is not set. Database features will be disabled.")
        return None

    kwargs: dict = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(pool_pre_ping=True, pool_recycle=300)

    engine = create_engine(database_url, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    logger.info("Connecting to store: %s", engine.url.render_as_string(hide_password=True))
    return Store(engine=engine, session_factory=sessionmaker(bind=engine, autoflush=False, expire_on_commit=False))


def require_store(store: Optional[Store]) -> Store:
    if store is None:
        raise StoreUnavailableError(
            "Database connection not available. Set DATABASE_URL to enable database features."
        )
    return store
