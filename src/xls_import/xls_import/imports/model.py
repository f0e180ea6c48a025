from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceEvent
from ..core.enums import ImportStatus
from ..employees.model import Employee
from ..shifts.model import Shift


@dataclass(frozen=True)
class ImportStats:
    """Per-upload counters.

    errors keeps the historical meaning (rows that did not yield a new
    employee), which mixes skipped rows with duplicate ids. skipped_rows and
    duplicate_employees split the two.
    """

    total_rows: int
    imported_rows: int
    errors: int
    skipped_rows: int = 0
    duplicate_employees: int = 0

    def as_dict(self) -> dict:
        return {
            "totalRows": self.total_rows,
            "importedRows": self.imported_rows,
            "errors": self.errors,
            "skippedRows": self.skipped_rows,
            "duplicateEmployees": self.duplicate_employees,
        }


@dataclass(frozen=True)
class ImportRecord:
    """Audit entry written once per upload."""

    import_id: str
    filename: str
    uploaded_at: datetime
    stats: ImportStats
    status: ImportStatus
    error: Optional[str] = None


@dataclass(frozen=True)
class NormalizationResult:
    import_id: str
    employees: list[Employee] = field(default_factory=list)
    attendance_events: list[AttendanceEvent] = field(default_factory=list)
    shifts: list[Shift] = field(default_factory=list)
    total_rows: int = 0
    skipped_rows: int = 0
    duplicate_employee_rows: int = 0

    def stats(self) -> ImportStats:
        return ImportStats(
            total_rows=self.total_rows,
            imported_rows=len(self.employees),
            errors=self.total_rows - len(self.employees),
            skipped_rows=self.skipped_rows,
            duplicate_employees=self.duplicate_employee_rows,
        )
