"""JSON-document store repository (implements IStoreRepository).

Reads the whole record store from one UTF-8 JSON document whose top-level
object maps entity names to attribute objects. Each call hands out a
complete snapshot; a search holds on to the snapshot it was given even if
the repository reloads in the meantime.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import aiofiles

from loresearch.domain.entities import Store
from loresearch.infrastructure.exceptions import (
    StoreFormatError,
    StoreNotFoundError,
    StoreReadError,
)

logger = logging.getLogger(__name__)


class JsonStoreRepository:
    """Loads the record store from a JSON file.

    With reload_on_request=True (default) every get_store() re-reads the
    file, so edits show up on the next query. Otherwise the first
    successfully loaded snapshot is reused until invalidate() is called.
    """

    def __init__(self, path: str | Path, reload_on_request: bool = True) -> None:
        """Initialize the repository.

        Args:
            path: Location of the JSON store document.
            reload_on_request: Re-read the document on every get_store().
        """
        self.path = Path(path)
        self.reload_on_request = reload_on_request
        self._snapshot: Store | None = None

    async def get_store(self) -> Store:
        """Return a store snapshot.

        Raises:
            StoreNotFoundError: Document does not exist.
            StoreFormatError: Document is not JSON or not an object.
            StoreReadError: Document could not be read.
        """
        if not self.reload_on_request and self._snapshot is not None:
            return self._snapshot
        snapshot = await self._load()
        if not self.reload_on_request:
            self._snapshot = snapshot
        return snapshot

    def invalidate(self) -> None:
        """Drop the cached snapshot (no-op when reloading on every request)."""
        self._snapshot = None

    async def _load(self) -> Store:
        raw = await self._read_text()
        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreFormatError(str(self.path), f"invalid JSON: {e}") from e
        except RecursionError as e:
            raise StoreFormatError(str(self.path), "document is nested too deeply") from e
        store = self._to_store(document)
        logger.info("Loaded %d entities from %s", len(store), self.path)
        return store

    async def _read_text(self) -> str:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise StoreNotFoundError(str(self.path)) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(str(self.path), str(e)) from e

    def _to_store(self, document: Any) -> Store:
        """Validate top-level shape; drop entities that are not objects."""
        if not isinstance(document, Mapping):
            raise StoreFormatError(
                str(self.path),
                f"top-level value must be an object, got {type(document).__name__}",
            )
        store: dict[str, Mapping[str, Any]] = {}
        for name, attributes in document.items():
            if not isinstance(attributes, Mapping):
                logger.warning(
                    "Entity %r in %s is not an object; skipped", name, self.path
                )
                continue
            store[name] = attributes
        return store
