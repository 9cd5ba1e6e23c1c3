"""JSON-file-backed implementation of UnitOfWork.

The whole store is one JSON document.  Entering the unit of work takes
the store's locks and loads a working copy; ``commit()`` writes the copy
back with a single atomic file replace, so an operation's cart and item
writes land together or not at all.  Leaving without committing simply
drops the working copy.

Two locks are held for the whole block: a re-entrant thread lock for
callers inside this process, and an exclusive lock on the sidecar
``<store>.lock`` file for other processes (every CLI command runs in its
own).  Two operations on the same cart therefore never interleave their
read-modify-write.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

import structlog
from filelock import FileLock, Timeout

from shopcart.domain.exceptions import StorageError
from shopcart.domain.repository.unit_of_work import UnitOfWork
from shopcart.infrastructure.persistence.json_cart_item_repository import (
    JsonCartItemRepository,
)
from shopcart.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from shopcart.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopcart.infrastructure.persistence.json_session import (
    JsonSession,
    empty_document,
)

logger = structlog.get_logger(__name__)

LOCK_TIMEOUT_SECONDS = 30.0

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path, lock_timeout: float = LOCK_TIMEOUT_SECONDS) -> None:
        self._file_path = file_path
        self._lock = _lock_for(file_path.resolve())
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_lock = FileLock(
            str(file_path.with_name(file_path.name + ".lock")),
            timeout=lock_timeout,
        )
        self._session: JsonSession | None = None
        self._ensure_file()

    # --- UnitOfWork interface -------------------------------------------------

    def __enter__(self) -> JsonUnitOfWork:
        self._acquire()
        try:
            self._open_session()
        except BaseException:
            self._release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is not None:
                logger.debug(
                    "unit_of_work_rolled_back",
                    path=str(self._file_path),
                    error=exc_type.__name__,
                )
        finally:
            self._session = None
            self._release()

    def commit(self) -> None:
        if self._session is None:
            raise StorageError("Cannot commit outside of a unit of work")
        self._persist_raw(self._session.document)
        logger.debug("unit_of_work_committed", path=str(self._file_path))

    def rollback(self) -> None:
        if self._session is None:
            return
        self._open_session()
        logger.debug("unit_of_work_rolled_back", path=str(self._file_path))

    # --- Locking --------------------------------------------------------------

    def _acquire(self) -> None:
        self._lock.acquire()
        try:
            self._file_lock.acquire()
        except Timeout as exc:
            self._lock.release()
            raise StorageError(f"Timed out waiting for store lock {exc.lock_file}") from exc
        except BaseException:
            self._lock.release()
            raise

    def _release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self._lock.release()

    # --- Session helpers ------------------------------------------------------

    def _open_session(self) -> None:
        self._session = JsonSession(self._load_raw())
        self.products = JsonProductRepository(self._session)
        self.carts = JsonCartRepository(self._session)
        self.cart_items = JsonCartItemRepository(self._session)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read store {self._file_path}: {exc}") from exc

    def _persist_raw(self, document: dict) -> None:
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=self._file_path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp.write(json.dumps(document, indent=2) + "\n")
            os.replace(tmp.name, self._file_path)
        except OSError as exc:
            raise StorageError(f"Cannot write store {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        self._acquire()
        try:
            if not self._file_path.exists():
                self._persist_raw(empty_document())
        finally:
            self._release()
