"""JSON-file document store with all-or-nothing transactions.

Both collections (warehouses and inventory items) live in one JSON file
so a single write can commit changes to several documents at once.
A transaction holds an exclusive lock on a sidecar ``<data file>.lock``
from loading the data until the commit lands, so the whole
read-check-write is serialized across every process sharing the file.
Threads of one process queue on a re-entrant lock in front of it.
Both locks together make the repositories' guarded increments atomic.
Commits go to a temporary file first and then replace the data file, so a
crash mid-write never leaves half a document.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)

COLLECTIONS = ("warehouses", "inventory_items")


class JsonDocumentStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._working: dict[str, list[dict]] | None = None
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_lock = FileLock(f"{file_path}.lock")
        with self._file_lock:
            self._ensure_file()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run the block against a private working copy of the data.

        Nested calls from the same thread join the outermost transaction,
        which alone commits or rolls back.
        """
        with self._lock:
            if self._working is not None:
                yield
                return

            with self._file_lock:
                self._working = self._load_raw()
                opened_as = _dump(self._working)
                logger.debug("Transaction opened on %s", self._file_path)
                try:
                    yield
                except BaseException:
                    logger.debug("Transaction rolled back on %s", self._file_path)
                    raise
                else:
                    # Read-only transactions leave the file alone
                    if _dump(self._working) != opened_as:
                        self._persist_raw(self._working)
                        logger.debug("Transaction committed on %s", self._file_path)
                finally:
                    self._working = None

    def collection(self, name: str) -> list[dict]:
        """Mutable documents of one collection inside the current transaction."""
        if self._working is None:
            raise RuntimeError("Collections can only be accessed inside a transaction")
        return self._working.setdefault(name, [])

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, list[dict]]:
        data = json.loads(self._file_path.read_text(encoding="utf-8"))
        for name in COLLECTIONS:
            data.setdefault(name, [])
        return data

    def _persist_raw(self, data: dict[str, list[dict]]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=self._file_path.name, suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(_dump(data))
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._persist_raw({name: [] for name in COLLECTIONS})


def _dump(data: dict[str, list[dict]]) -> str:
    return json.dumps(data, indent=2) + "\n"
