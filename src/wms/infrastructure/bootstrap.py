"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from wms.infrastructure.config import settings
from wms.infrastructure.persistence.json_document_store import JsonDocumentStore
from wms.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


@lru_cache(maxsize=None)
def _document_store(file_path: Path) -> JsonDocumentStore:
    # One store (and so one thread lock) per data file in the process
    return JsonDocumentStore(file_path)


def unit_of_work(file_path: Path | None = None) -> JsonUnitOfWork:
    return JsonUnitOfWork(_document_store(file_path or settings.data_file))
