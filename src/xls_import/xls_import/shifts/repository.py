from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def insert_many(self, shifts: Sequence[Shift]) -> int:
        raise NotImplementedError

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[Shift]:
        raise NotImplementedError
