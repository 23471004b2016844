"""Bounded in-memory score record repository."""

from __future__ import annotations

import threading
from collections import deque
from datetime import datetime
from typing import Deque, List

from .interfaces import IScoreRepository, ScoreRecord


class InMemoryScoreRepository(IScoreRepository):
    """Keeps the most recent ``capacity`` records; nothing is persisted."""

    def __init__(self, capacity: int = 1000) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero")
        self._records: Deque[ScoreRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._records.maxlen or 0

    def save(self, record: ScoreRecord) -> None:
        with self._lock:
            self._records.append(record)

    def find_by_date(self, start: datetime, end: datetime) -> List[ScoreRecord]:
        with self._lock:
            return [
                record for record in self._records if start <= record.timestamp <= end
            ]

    def find_by_target(self, target: str) -> List[ScoreRecord]:
        with self._lock:
            return [record for record in self._records if record.target == target]

    def all(self) -> List[ScoreRecord]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
