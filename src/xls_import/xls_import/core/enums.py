from __future__ import annotations

from enum import Enum


class ImportStatus(str, Enum):
    """Lifecycle state stored on an import audit record."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class EventType(str, Enum):
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    BREAK_START = "break_start"
    BREAK_END = "break_end"


class ShiftType(str, Enum):
    """Known shift types.

    Imported rows are not validated against this list; any text is stored.
    """

    MORNING = "morning"
    AFTERNOON = "afternoon"
    NIGHT = "night"
    CUSTOM = "custom"


class CollectionName(str, Enum):
    IMPORTS = "imports"
    EMPLOYEES = "employees"
    ATTENDANCE_EVENTS = "attendance_events"
    SHIFTS = "shifts"
