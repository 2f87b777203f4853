# src/taskbell/storage/snapshot.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.errors import PersistenceReadError, PersistenceWriteError
from ..core.ports import BlobStore
from ..tasks.task_codec import decode_tasks, encode_tasks
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "task_list"


@dataclass(slots=True, frozen=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    error: PersistenceReadError | None = None
    found: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True, frozen=True)
class SaveResult:
    error: PersistenceWriteError | None = None
    size: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class SnapshotRepository:
    """
    Reads and writes the whole task collection under one blob key.

    Failures are returned, never raised:
    - load(): missing key -> empty, found=False, no error
              unreadable / corrupt -> empty + PersistenceReadError
    - save(): encode or write failure -> PersistenceWriteError
    """

    def __init__(self, blobs: BlobStore, *, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._blobs = blobs
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> LoadResult:
        try:
            blob = self._blobs.get(self._key)
        except Exception as e:
            logger.exception("Snapshot read failed key=%s", self._key)
            err = PersistenceReadError(f"read failed for key {self._key!r}: {e}")
            err.__cause__ = e
            return LoadResult(error=err)

        if blob is None:
            return LoadResult()

        try:
            tasks = decode_tasks(blob)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Snapshot key=%s is corrupt (%s); starting empty.", self._key, e)
            err = PersistenceReadError(f"corrupt snapshot for key {self._key!r}: {e}")
            err.__cause__ = e
            return LoadResult(error=err, found=True)

        return LoadResult(tasks=tasks, found=True)

    def save(self, tasks: Iterable[Task]) -> SaveResult:
        try:
            blob = encode_tasks(tasks)
            self._blobs.put(self._key, blob)
        except Exception as e:
            logger.warning("Snapshot write failed key=%s: %s", self._key, e, exc_info=True)
            err = PersistenceWriteError(f"write failed for key {self._key!r}: {e}")
            err.__cause__ = e
            return SaveResult(error=err)
        return SaveResult(size=len(blob))
