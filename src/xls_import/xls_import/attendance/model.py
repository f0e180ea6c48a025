from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EventType


@dataclass(frozen=True)
class AttendanceEvent:
    """A single check-in or check-out occurrence.

    A row holding both times yields two events; only the timestamp matching
    event_type is set.
    """

    import_id: str
    employee_id: str
    date: datetime
    event_type: EventType
    created_at: datetime
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
