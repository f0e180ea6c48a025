from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def insert_many(self, events: Sequence[AttendanceEvent]) -> int:
        raise NotImplementedError

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        raise NotImplementedError
