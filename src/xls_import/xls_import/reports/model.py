from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from ..shifts.model import Shift


@dataclass(frozen=True)
class YearSnapshot:
    """Raw records created within one calendar year."""

    year: int
    employees: Sequence[Employee]
    attendance_events: Sequence[AttendanceEvent]
    shifts: Sequence[Shift]
