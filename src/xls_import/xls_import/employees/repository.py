from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def insert_many(self, employees: Sequence[Employee]) -> int:
        raise NotImplementedError

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[Employee]:
        raise NotImplementedError
