from __future__ import annotations

import logging
from typing import Any, Protocol

from .payload import parse_payload
from .snapshot import Snapshot, SnapshotStore

logger = logging.getLogger(__name__)


class PayloadSource(Protocol):
    def fetch_payload(self) -> Any:
        raise NotImplementedError


class SnapshotService:
    """Use case: fetch the sheets, normalize them, swap the in-memory snapshot."""

    def __init__(self, source: PayloadSource, store: SnapshotStore):
        self._source = source
        self._store = store

    def refresh(self) -> Snapshot:
        # Any error leaves the previous snapshot in place.
        snapshot = parse_payload(self._source.fetch_payload())
        self._store.replace(snapshot)
        return snapshot

    def ensure_loaded(self) -> Snapshot:
        if not self._store.loaded:
            logger.info("no snapshot yet, fetching from data source")
            return self.refresh()
        return self._store.current()
