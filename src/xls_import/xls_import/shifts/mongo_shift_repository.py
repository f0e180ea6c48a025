from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import CollectionName
from ..database.mongo_base import MongoRepository, created_between
from .model import Shift
from .repository import ShiftRepository


def to_document(s: Shift) -> Dict[str, Any]:
    return {
        "importId": s.import_id,
        "employeeId": s.employee_id,
        "date": s.date,
        "shiftType": s.shift_type,
        "startTime": s.start_time,
        "endTime": s.end_time,
        "duration": int(s.duration),
        "createdAt": s.created_at,
    }


def from_document(d: Dict[str, Any]) -> Shift:
    return Shift(
        import_id=d["importId"],
        employee_id=str(d["employeeId"]),
        date=as_utc(d["date"]),
        shift_type=str(d["shiftType"]),
        start_time=str(d["startTime"]),
        end_time=str(d["endTime"]),
        duration=int(d.get("duration") or 0),
        created_at=as_utc(d["createdAt"]),
    )


class MongoShiftRepository(MongoRepository, ShiftRepository):
    collection_name = CollectionName.SHIFTS

    def insert_many(self, shifts: Sequence[Shift]) -> int:
        return self._insert_documents(to_document(s) for s in shifts)

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[Shift]:
        return [from_document(d) for d in self._find_documents(created_between(start, end))]
