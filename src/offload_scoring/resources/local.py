"""In-process resource query adapters for orchestrators and tests."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Tuple

from offload_scoring.domain.interfaces import IResourceQuery
from offload_scoring.domain.models import QueryResult

ResourceCallback = Callable[[str], Tuple[float, bool]]


class StaticResourceQuery(IResourceQuery):
    """Answers queries from an immutable snapshot of metrics."""

    def __init__(self, metrics: Mapping[str, float]) -> None:
        self._metrics: Mapping[str, float] = MappingProxyType(
            {key: float(value) for key, value in metrics.items()}
        )

    def query(self, key: str) -> QueryResult:
        if key not in self._metrics:
            return QueryResult.unavailable()
        return QueryResult.ok(self._metrics[key])


class ResourceStore(IResourceQuery):
    """Thread-safe metric store written by monitors and read by strategies.

    Monitors publish the latest measurement per key; a key that was never
    written, or was removed, resolves to unavailable.
    """

    def __init__(self, initial: Optional[Mapping[str, float]] = None) -> None:
        self._lock = threading.Lock()
        self._values: Dict[str, float] = {
            key: float(value) for key, value in (initial or {}).items()
        }

    def update(self, key: str, value: float) -> None:
        if not key or not key.strip():
            raise ValueError("resource key must be a non-empty string")
        with self._lock:
            self._values[key] = float(value)

    def update_many(self, metrics: Mapping[str, float]) -> None:
        with self._lock:
            for key, value in metrics.items():
                self._values[key] = float(value)

    def remove(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def snapshot(self) -> StaticResourceQuery:
        """Freeze the current values so a scoring pass sees no skew."""
        with self._lock:
            return StaticResourceQuery(dict(self._values))

    def query(self, key: str) -> QueryResult:
        with self._lock:
            value = self._values.get(key)
        if value is None:
            return QueryResult.unavailable()
        return QueryResult.ok(value)


class CallableResourceQuery(IResourceQuery):
    """Adapts a ``callback(key) -> (value, success)`` function."""

    def __init__(self, callback: ResourceCallback) -> None:
        self._callback = callback

    def query(self, key: str) -> QueryResult:
        value, success = self._callback(key)
        if not success:
            return QueryResult.unavailable()
        return QueryResult.ok(value)
