from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import CollectionName
from ..database.mongo_base import MongoRepository, compact, created_between
from .model import Employee
from .repository import EmployeeRepository


def to_document(e: Employee) -> Dict[str, Any]:
    return compact(
        {
            "importId": e.import_id,
            "employeeId": e.employee_id,
            "name": e.name,
            "department": e.department,
            "position": e.position,
            "email": e.email,
            "createdAt": e.created_at,
        }
    )


def from_document(d: Dict[str, Any]) -> Employee:
    return Employee(
        import_id=d["importId"],
        employee_id=str(d["employeeId"]),
        name=d["name"],
        department=d.get("department"),
        position=d.get("position"),
        email=d.get("email"),
        created_at=as_utc(d["createdAt"]),
    )


class MongoEmployeeRepository(MongoRepository, EmployeeRepository):
    collection_name = CollectionName.EMPLOYEES

    def insert_many(self, employees: Sequence[Employee]) -> int:
        return self._insert_documents(to_document(e) for e in employees)

    def list_created_between(self, *, start: datetime, end: datetime) -> Sequence[Employee]:
        return [from_document(d) for d in self._find_documents(created_between(start, end))]
