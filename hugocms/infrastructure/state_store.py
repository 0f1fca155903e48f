# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-wide key/value state with expiry and atomic counters."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock
from typing import Any, Protocol


class StateStore(Protocol):
    def get(self, key: str) -> Any | None: ...

    def put(self, key: str, value: Any, ttl_seconds: float | None = None) -> None: ...

    def increment(self, key: str, ttl_seconds: float) -> int: ...

    def ttl(self, key: str) -> float: ...


@dataclass(slots=True)
class StateEntry:
    value: Any
    expires_at: float | None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class InMemoryStateStore(StateStore):
    """Lock-serialised store; a counter's window starts with its first increment."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = Lock()
        self._store: dict[str, StateEntry] = {}

    def _live_entry(self, key: str, now: float) -> StateEntry | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired(now):
            del self._store[key]
            return None
        return entry

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._live_entry(key, self._clock())
            return entry.value if entry else None

    def put(self, key: str, value: Any, ttl_seconds: float | None = None) -> None:
        with self._lock:
            now = self._clock()
            expires_at = now + ttl_seconds if ttl_seconds is not None else None
            self._store[key] = StateEntry(value=value, expires_at=expires_at)

    def increment(self, key: str, ttl_seconds: float) -> int:
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None:
                entry = StateEntry(value=0, expires_at=now + ttl_seconds)
                self._store[key] = entry
            entry.value = int(entry.value) + 1
            return entry.value

    def ttl(self, key: str) -> float:
        with self._lock:
            now = self._clock()
            entry = self._live_entry(key, now)
            if entry is None or entry.expires_at is None:
                return 0.0
            return max(0.0, entry.expires_at - now)


__all__ = ["InMemoryStateStore", "StateEntry", "StateStore"]
