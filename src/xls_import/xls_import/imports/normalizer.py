from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceEvent
from ..common.datetime_utils import now_utc
from ..core.enums import EventType
from ..employees.model import Employee
from ..shifts.model import Shift
from .columns import SpreadsheetRow, resolve_row, shift_duration
from .model import NormalizationResult

logger = logging.getLogger(__name__)


class RowNormalizer:
    """Turn loosely-typed spreadsheet rows into employees, events and shifts.

    Every record produced by one ``normalize`` call shares a fresh import id
    and the same createdAt. A row that fails to convert is logged and
    skipped as a whole.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = now_utc,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self._clock = clock
        self._id_factory = id_factory

    def normalize(self, rows: Sequence[Mapping[str, Any]], *, now: Optional[datetime] = None) -> NormalizationResult:
        import_id = self._id_factory()
        now = now or self._clock()

        employees: list[Employee] = []
        events: list[AttendanceEvent] = []
        shifts: list[Shift] = []
        seen_ids: set[str] = set()
        skipped = 0
        duplicates = 0

        for index, raw in enumerate(rows):
            try:
                row = resolve_row(raw, index=index, now=now)
                row_events = self._events_for(row, import_id=import_id, now=now)
                shift = self._shift_for(row, import_id=import_id, now=now)
            except Exception as e:
                logger.warning("Erro ao normalizar linha %d: %s", index, e)
                skipped += 1
                continue

            if row.employee_id in seen_ids:
                duplicates += 1
            else:
                seen_ids.add(row.employee_id)
                employees.append(self._employee_for(row, import_id=import_id, now=now))

            events.extend(row_events)
            shifts.append(shift)

        if skipped:
            logger.info("Import %s: skipped %d of %d rows", import_id, skipped, len(rows))

        return NormalizationResult(
            import_id=import_id,
            employees=employees,
            attendance_events=events,
            shifts=shifts,
            total_rows=len(rows),
            skipped_rows=skipped,
            duplicate_employee_rows=duplicates,
        )

    def _employee_for(self, row: SpreadsheetRow, *, import_id: str, now: datetime) -> Employee:
        return Employee(
            import_id=import_id,
            employee_id=row.employee_id,
            name=row.name,
            department=row.department,
            position=row.position,
            email=row.email,
            created_at=now,
        )

    def _events_for(self, row: SpreadsheetRow, *, import_id: str, now: datetime) -> list[AttendanceEvent]:
        # Check-in and check-out are always separate records.
        out: list[AttendanceEvent] = []
        if row.check_in is not None:
            out.append(
                AttendanceEvent(
                    import_id=import_id,
                    employee_id=row.employee_id,
                    date=row.date,
                    check_in=row.check_in,
                    event_type=EventType.CHECK_IN,
                    created_at=now,
                )
            )
        if row.check_out is not None:
            out.append(
                AttendanceEvent(
                    import_id=import_id,
                    employee_id=row.employee_id,
                    date=row.date,
                    check_out=row.check_out,
                    event_type=EventType.CHECK_OUT,
                    created_at=now,
                )
            )
        return out

    def _shift_for(self, row: SpreadsheetRow, *, import_id: str, now: datetime) -> Shift:
        return Shift(
            import_id=import_id,
            employee_id=row.employee_id,
            date=row.date,
            shift_type=row.shift_type,
            start_time=row.start_time,
            end_time=row.end_time,
            duration=shift_duration(row.start_time, row.end_time),
            created_at=now,
        )
