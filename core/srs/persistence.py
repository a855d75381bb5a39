"""
Persistence Layer - Key-Value Blob Storage

Handles raw blob I/O for the study core. Two keys are used: the full card
collection and the progress ledger (see constants.CARDS_KEY / PROGRESS_KEY).

This module handles ONLY storage I/O.
Encoding is handled by the codec module.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional, Protocol

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.srs.errors import PersistenceError
from core.srs.models import Base, StoredBlob

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    """Storage collaborator contract."""

    def load(self, key: str) -> Optional[str]:
        ...

    def save(self, key: str, blob: str) -> None:
        ...

    def save_many(self, items: Mapping[str, str]) -> None:
        ...


class MemoryBlobStore:
    """
    Dict-backed blob store for tests and throwaway runs.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self.blobs: dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self.blobs.get(key)

    def save(self, key: str, blob: str) -> None:
        self.save_many({key: blob})

    def save_many(self, items: Mapping[str, str]) -> None:
        self.blobs.update(items)


class SqlBlobStore:
    """
    Blob store backed by a SQLAlchemy database.

    A session is opened per call and closed right after; no long-held locks.
    """

    def __init__(self, database_url: str, echo: bool = False):
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if database_url.startswith("sqlite"):
            _ensure_sqlite_dir(database_url)
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if database_url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(database_url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        self.init_db()

    def init_db(self) -> None:
        """
        Create the blob table if it does not exist.

        Safe to call multiple times.
        """
        try:
            if StoredBlob.__tablename__ not in inspect(self.engine).get_table_names():
                Base.metadata.create_all(self.engine)
                logger.info("Created blob table on %s", self.engine.url)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not initialize blob store: {exc}") from exc

    def reset_db(self) -> None:
        """
        DANGEROUS: Delete all blobs and recreate the table.

        All cards and progress will be lost!
        """
        try:
            Base.metadata.drop_all(self.engine)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not reset blob store: {exc}") from exc
        logger.warning("Dropped blob table on %s", self.engine.url)
        self.init_db()

    def get_session(self) -> Session:
        return self._session_factory()

    def load(self, key: str) -> Optional[str]:
        """
        Read a blob.

        Returns:
            The stored string, or None if the key was never saved
        """
        session = self.get_session()
        try:
            row = session.get(StoredBlob, key)
            return row.value if row is not None else None
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not load {key!r}: {exc}") from exc
        finally:
            session.close()

    def save(self, key: str, blob: str) -> None:
        self.save_many({key: blob})

    def save_many(self, items: Mapping[str, str]) -> None:
        """
        Write several blobs in a single transaction (all or nothing).
        """
        session = self.get_session()
        try:
            stamp = datetime.now(timezone.utc)
            for key, blob in items.items():
                row = session.get(StoredBlob, key)
                if row is None:
                    session.add(StoredBlob(key=key, value=blob, updated_at=stamp))
                else:
                    row.value = blob
                    row.updated_at = stamp
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise PersistenceError(f"Could not save {sorted(items)}: {exc}") from exc
        finally:
            session.close()


def _ensure_sqlite_dir(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        return
    path = database_url[len(prefix):]
    if not path or path == ":memory:":
        return
    Path(path).parent.mkdir(parents=True, exist_ok=True)
