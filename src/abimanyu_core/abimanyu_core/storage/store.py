from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Protocol, Sequence

from ..core.enums import Collection

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, list], None]
Unsubscribe = Callable[[], None]


def _key(collection: str | Collection) -> str:
    return collection.value if isinstance(collection, Collection) else str(collection)


class KeyValueStore(Protocol):
    """Persistence collaborator: whole-collection reads and writes.

    Implementations must keep record order across read/write round-trips;
    kasbon deduction matching relies on it.
    """

    def read(self, collection: str | Collection) -> list[dict]:
        raise NotImplementedError

    def write(self, collection: str | Collection, records: Sequence[dict]) -> None:
        raise NotImplementedError

    def subscribe(self, collection: str | Collection, on_change: ChangeListener) -> Unsubscribe:
        raise NotImplementedError


class _ListenerMixin:
    def __init__(self) -> None:
        self._listeners: dict[str, list[ChangeListener]] = {}

    def subscribe(self, collection: str | Collection, on_change: ChangeListener) -> Unsubscribe:
        name = _key(collection)
        self._listeners.setdefault(name, []).append(on_change)

        def unsubscribe() -> None:
            listeners = self._listeners.get(name, [])
            if on_change in listeners:
                listeners.remove(on_change)

        return unsubscribe

    def _emit(self, name: str, records: list[dict]) -> None:
        for listener in list(self._listeners.get(name, [])):
            listener(name, copy.deepcopy(records))


class InMemoryStore(_ListenerMixin):
    """Process-local store (tests, or when no storage path is configured)."""

    def __init__(self, initial: dict[str, list[dict]] | None = None) -> None:
        super().__init__()
        self._data: dict[str, list[dict]] = {k: copy.deepcopy(v) for k, v in (initial or {}).items()}

    def read(self, collection: str | Collection) -> list[dict]:
        return copy.deepcopy(self._data.get(_key(collection), []))

    def write(self, collection: str | Collection, records: Sequence[dict]) -> None:
        name = _key(collection)
        self._data[name] = copy.deepcopy(list(records))
        self._emit(name, self._data[name])


class JsonFileStore(_ListenerMixin):
    """All collections in one JSON document on disk.

    Writes go through a temp file + replace so a crash never leaves a half
    written document behind.
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self._path = Path(path)
        self._data = self._load()

    def _load(self) -> dict[str, list[dict]]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Invalid store document: {self._path}")
        return data

    def _flush(self, data: dict[str, list[dict]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), prefix=".store-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def read(self, collection: str | Collection) -> list[dict]:
        return copy.deepcopy(self._data.get(_key(collection), []))

    def write(self, collection: str | Collection, records: Sequence[dict]) -> None:
        name = _key(collection)
        # Memory only changes once the document is safely on disk.
        data = {**self._data, name: copy.deepcopy(list(records))}
        self._flush(data)
        self._data = data
        logger.debug("store write %s (%d records) -> %s", name, len(records), self._path)
        self._emit(name, self._data[name])
