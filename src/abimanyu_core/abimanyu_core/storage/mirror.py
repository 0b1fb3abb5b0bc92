from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

from ..core.constants import MIRROR_MAX_ATTEMPTS
from ..core.enums import Collection, NotificationLevel
from ..notifications.notifier import Notifier
from .store import ChangeListener, KeyValueStore, Unsubscribe, _key

logger = logging.getLogger(__name__)


class RemoteMirror(Protocol):
    def push(self, collection: str, records: Sequence[dict]) -> None:
        raise NotImplementedError

    def pull(self, collection: str) -> Optional[list[dict]]:
        """Return the mirrored snapshot, or None when the mirror has none."""

        raise NotImplementedError


class MirroredStore:
    """Local store with a best-effort remote copy.

    The local write is authoritative and visible immediately. The remote push
    is tried at most twice; a failure after that is logged and surfaced via
    the notifier but never raised to the caller.
    """

    def __init__(
        self,
        local: KeyValueStore,
        mirror: RemoteMirror,
        *,
        notifier: Optional[Notifier] = None,
        max_attempts: int = MIRROR_MAX_ATTEMPTS,
    ):
        self._local = local
        self._mirror = mirror
        self._notifier = notifier
        self._max_attempts = max(1, int(max_attempts))

    def read(self, collection: str | Collection) -> list[dict]:
        return self._local.read(collection)

    def write(self, collection: str | Collection, records: Sequence[dict]) -> None:
        self._local.write(collection, records)
        self._push(_key(collection), list(records))

    def subscribe(self, collection: str | Collection, on_change: ChangeListener) -> Unsubscribe:
        return self._local.subscribe(collection, on_change)

    def _push(self, name: str, records: list[dict]) -> bool:
        for attempt in range(1, self._max_attempts + 1):
            try:
                self._mirror.push(name, records)
                return True
            except Exception:
                logger.warning("mirror push failed for %s (attempt %d/%d)", name, attempt, self._max_attempts, exc_info=True)

        logger.error("mirror push gave up for %s", name)
        if self._notifier:
            self._notifier.notify(NotificationLevel.ERROR, "Gagal sinkronisasi data ke database")
        return False

    def hydrate(self, collections: Sequence[str | Collection] = tuple(Collection)) -> int:
        """Copy mirrored snapshots into the local store. Returns collections loaded."""
        loaded = 0
        for collection in collections:
            name = _key(collection)
            try:
                records = self._mirror.pull(name)
            except Exception:
                logger.exception("mirror pull failed for %s", name)
                continue
            if records is None:
                continue
            self._local.write(name, records)
            loaded += 1
        logger.info("hydrated %d collections from mirror", loaded)
        return loaded
