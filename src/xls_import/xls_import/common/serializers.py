"""JSON shapes shared by the year view and the export document."""
from __future__ import annotations

from typing import Any, Dict

from ..attendance.model import AttendanceEvent
from ..employees.model import Employee
from ..shifts.model import Shift
from .datetime_utils import to_iso_z


def _without_none(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def employee_profile(e: Employee) -> Dict[str, Any]:
    return _without_none(
        {
            "employeeId": e.employee_id,
            "name": e.name,
            "department": e.department,
            "position": e.position,
            "email": e.email,
        }
    )


def employee_record(e: Employee) -> Dict[str, Any]:
    return _without_none({"importId": e.import_id, **employee_profile(e), "createdAt": to_iso_z(e.created_at)})


def event_entry(ev: AttendanceEvent) -> Dict[str, Any]:
    return _without_none(
        {
            "date": to_iso_z(ev.date),
            "checkIn": to_iso_z(ev.check_in),
            "checkOut": to_iso_z(ev.check_out),
            "eventType": ev.event_type.value,
        }
    )


def event_record(ev: AttendanceEvent) -> Dict[str, Any]:
    return {
        "importId": ev.import_id,
        "employeeId": ev.employee_id,
        **event_entry(ev),
        "createdAt": to_iso_z(ev.created_at),
    }


def shift_entry(s: Shift) -> Dict[str, Any]:
    return {
        "date": to_iso_z(s.date),
        "shiftType": s.shift_type,
        "startTime": s.start_time,
        "endTime": s.end_time,
        "duration": s.duration,
    }


def shift_record(s: Shift) -> Dict[str, Any]:
    return {
        "importId": s.import_id,
        "employeeId": s.employee_id,
        **shift_entry(s),
        "createdAt": to_iso_z(s.created_at),
    }
