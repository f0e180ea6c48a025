from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import CollectionName, EventType
from ..database.mongo_base import MongoRepository, compact, created_between, optional_datetime
from .model import AttendanceEvent
from .repository import AttendanceRepository


def to_document(ev: AttendanceEvent) -> Dict[str, Any]:
    return compact(
        {
            "importId": ev.import_id,
            "employeeId": ev.employee_id,
            "date": ev.date,
            "checkIn": ev.check_in,
            "checkOut": ev.check_out,
            "eventType": ev.event_type.value,
            "createdAt": ev.created_at,
        }
    )


def from_document(d: Dict[str, Any]) -> AttendanceEvent:
    return AttendanceEvent(
        import_id=d["importId"],
        employee_id=str(d["employeeId"]),
        date=as_utc(d["date"]),
        event_type=EventType(d["eventType"]),
        check_in=optional_datetime(d.get("checkIn")),
        check_out=optional_datetime(d.get("checkOut")),
        created_at=as_utc(d["createdAt"]),
    )


class MongoAttendanceRepository(MongoRepository, AttendanceRepository):
    collection_name = CollectionName.ATTENDANCE_EVENTS

    def insert_many(self, events: Sequence[AttendanceEvent]) -> int:
        return self._insert_documents(to_document(ev) for ev in events)

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        return [from_document(d) for d in self._find_documents(created_between(start, end))]
