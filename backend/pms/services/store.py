"""Record store with a pluggable backend (memory, local file, SQL)."""

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine

from pms.core.config import Settings, StoreBackendKind, get_settings
from pms.core.database import Base, get_engine, make_session_factory
from pms.core.errors import StoreCorruptionError
from pms.models import AppState, RecordDocument
from pms.services.seed import build_seed_state

logger = logging.getLogger(__name__)


class StoreBackend(ABC):
    """Abstract key-value backend holding one serialized record."""

    @abstractmethod
    def read(self) -> Optional[str]:
        """Return the stored payload, or None when nothing was saved yet."""
        pass

    @abstractmethod
    def write(self, payload: str) -> None:
        """Overwrite the stored payload."""
        pass


class MemoryBackend(StoreBackend):
    """In-process backend, used by tests and throwaway sessions."""

    def __init__(self, payload: Optional[str] = None):
        self.payload = payload

    def read(self) -> Optional[str]:
        return self.payload

    def write(self, payload: str) -> None:
        self.payload = payload


class FileBackend(StoreBackend):
    """Local JSON document, the server-side analogue of browser local storage."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target then rename so readers never see half a document
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".record-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise


class SqlBackend(StoreBackend):
    """One row in ``record_documents`` per store key."""

    def __init__(self, engine: Engine, key: str, create_tables: bool = True):
        self.engine = engine
        self.key = key
        self.session_factory = make_session_factory(engine)
        if create_tables:
            Base.metadata.create_all(engine, tables=[RecordDocument.__table__])

    def read(self) -> Optional[str]:
        with self.session_factory() as session:
            row = session.scalar(select(RecordDocument).where(RecordDocument.key == self.key))
            return row.payload if row else None

    def write(self, payload: str) -> None:
        with self.session_factory() as session:
            row = session.get(RecordDocument, self.key)
            if row is None:
                session.add(RecordDocument(key=self.key, payload=payload))
            else:
                row.payload = payload
            session.commit()


class RecordStore:
    """Loads and saves the whole application record.

    There are no partial updates: every save overwrites the full document.
    A payload that cannot be parsed is replaced by the seed record and the
    failure is kept on ``last_load_error``.
    """

    def __init__(
        self,
        backend: StoreBackend,
        seed_factory: Callable[[], AppState] = build_seed_state,
    ):
        self.backend = backend
        self.seed_factory = seed_factory
        self.last_load_error: Optional[StoreCorruptionError] = None

    def load(self) -> AppState:
        try:
            payload = self.backend.read()
            if payload is None:
                return self.seed_factory()
            state = AppState.model_validate_json(payload)
        except (ValidationError, UnicodeDecodeError) as e:
            detail = f"{e.error_count()} errors" if isinstance(e, ValidationError) else "not UTF-8"
            self.last_load_error = StoreCorruptionError(
                f"Persisted record is unreadable ({detail}); using default data"
            )
            logger.error(
                "Record store payload corrupt, falling back to seed data",
                exc_info=True,
            )
            return self.seed_factory()

        self.last_load_error = None
        return state

    def save(self, state: AppState) -> None:
        self.backend.write(state.model_dump_json(by_alias=True))

    @contextmanager
    def transaction(self) -> Iterator[AppState]:
        """Yield a working copy of the record; persist it only on clean exit."""
        working = self.load().model_copy(deep=True)
        yield working
        self.save(working)

    @property
    def recovered_from_corruption(self) -> bool:
        return self.last_load_error is not None


def build_backend(settings: Settings) -> StoreBackend:
    if settings.store_backend == StoreBackendKind.MEMORY:
        return MemoryBackend()
    if settings.store_backend == StoreBackendKind.SQL:
        return SqlBackend(get_engine(), key=settings.store_key)
    return FileBackend(settings.store_path)


_record_store: Optional[RecordStore] = None


def get_record_store() -> RecordStore:
    """Process-wide store built from settings (FastAPI dependency)."""
    global _record_store
    if _record_store is None:
        _record_store = RecordStore(build_backend(get_settings()))
    return _record_store
