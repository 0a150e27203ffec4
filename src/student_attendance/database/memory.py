from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator


class MemoryDatabase:
    """Process-local data store shared by all memory repositories.

    Note: Tables are plain dicts keyed by id. Every read/write goes through
    ``transaction()``. The lock is re-entrant, so services wrap a
    check-then-write sequence in one outer transaction while the
    repositories they call take it again.

    Ids come from per-table counters and are never reused after a delete.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tables: Dict[str, Dict[int, Any]] = {}
        self._counters: Dict[str, int] = {}

    def table(self, name: str) -> Dict[int, Any]:
        return self._tables.setdefault(name, {})

    def next_id(self, name: str) -> int:
        value = self._counters.get(name, 0) + 1
        self._counters[name] = value
        return value

    @contextmanager
    def transaction(self) -> Iterator["MemoryDatabase"]:
        with self._lock:
            yield self
