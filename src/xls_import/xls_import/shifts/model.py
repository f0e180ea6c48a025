from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Shift:
    """A scheduled work period for one employee.

    shift_type is free text; imports may carry values outside ShiftType.
    duration is in whole hours.
    """

    import_id: str
    employee_id: str
    date: datetime
    shift_type: str
    start_time: str
    end_time: str
    duration: int
    created_at: datetime
