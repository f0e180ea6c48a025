from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import year_bounds
from ..common.serializers import employee_profile, event_entry, shift_entry
from ..common.validators import require_year
from ..core.constants import UNSPECIFIED_DEPARTMENT
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from .model import YearSnapshot


def employees_by_department(employees: Sequence[Employee]) -> Dict[str, int]:
    return dict(Counter(e.department or UNSPECIFIED_DEPARTMENT for e in employees))


def shifts_by_type(shifts: Sequence[Shift]) -> Dict[str, int]:
    return dict(Counter(s.shift_type for s in shifts))


def average_shift_duration(shifts: Sequence[Shift]) -> float:
    if not shifts:
        return 0
    return sum(s.duration for s in shifts) / len(shifts)


class YearReportService:
    """Year view over the three record collections.

    Records are selected by createdAt (when they were imported), not by
    their business date.
    """

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository, shifts: ShiftRepository):
        self._employees = employees
        self._attendance = attendance
        self._shifts = shifts

    def load_year(self, year: int) -> YearSnapshot:
        start, end = year_bounds(require_year(year))
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="year-query") as pool:
            employees_f = pool.submit(self._employees.list_created_between, start=start, end=end)
            events_f = pool.submit(self._attendance.list_created_between, start=start, end=end)
            shifts_f = pool.submit(self._shifts.list_created_between, start=start, end=end)
            # .result() re-raises the first failing query.
            return YearSnapshot(
                year=year,
                employees=list(employees_f.result()),
                attendance_events=list(events_f.result()),
                shifts=list(shifts_f.result()),
            )

    def build_year_report(self, year: int) -> Dict[str, Any]:
        snap = self.load_year(year)

        by_employee: Dict[str, Dict[str, Any]] = {}
        for e in snap.employees:
            # Same employee id across imports: the later record replaces the
            # profile, keeping its original position.
            by_employee[e.employee_id] = {**employee_profile(e), "attendanceEvents": [], "shifts": []}

        for ev in snap.attendance_events:
            entry = by_employee.get(ev.employee_id)
            if entry is not None:
                entry["attendanceEvents"].append(event_entry(ev))

        for s in snap.shifts:
            entry = by_employee.get(s.employee_id)
            if entry is not None:
                entry["shifts"].append(shift_entry(s))

        return {
            "ok": True,
            "year": year,
            "totalEmployees": len(snap.employees),
            "totalAttendanceEvents": len(snap.attendance_events),
            "totalShifts": len(snap.shifts),
            "employees": list(by_employee.values()),
            "summary": {
                "employeesByDepartment": employees_by_department(snap.employees),
                "shiftsByType": shifts_by_type(snap.shifts),
                "averageShiftDuration": average_shift_duration(snap.shifts),
            },
        }
