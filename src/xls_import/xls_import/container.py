from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mongo_attendance_repository import MongoAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import MAX_UPLOAD_BYTES
from .database.connection import DatabaseConnection, MongoConfig
from .employees.mongo_employee_repository import MongoEmployeeRepository
from .employees.repository import EmployeeRepository
from .exports.service import TypeScriptExportService
from .imports.mongo_import_repository import MongoImportRepository
from .imports.repository import ImportRepository
from .imports.service import ImportService
from .reports.service import YearReportService
from .shifts.mongo_shift_repository import MongoShiftRepository
from .shifts.repository import ShiftRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    imports_repo: ImportRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    shifts_repo: ShiftRepository

    import_service: ImportService
    year_report_service: YearReportService
    export_service: TypeScriptExportService


def wire(
    *,
    conn: Optional[DatabaseConnection],
    imports_repo: ImportRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    shifts_repo: ShiftRepository,
    import_key: Optional[str],
    max_upload_bytes: int = MAX_UPLOAD_BYTES,
) -> Container:
    import_service = ImportService(
        imports_repo,
        employees_repo,
        attendance_repo,
        shifts_repo,
        import_key=import_key,
        max_upload_bytes=max_upload_bytes,
    )
    year_report_service = YearReportService(employees_repo, attendance_repo, shifts_repo)
    export_service = TypeScriptExportService(year_report_service)

    return Container(
        conn=conn,
        imports_repo=imports_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        shifts_repo=shifts_repo,
        import_service=import_service,
        year_report_service=year_report_service,
        export_service=export_service,
    )


def build_container(*, mongo_config: dict, import_key: Optional[str], max_upload_bytes: int = MAX_UPLOAD_BYTES) -> Container:
    config = MongoConfig(uri=str(mongo_config["uri"]), database=str(mongo_config["database"]))
    conn = DatabaseConnection.get_instance(config)

    return wire(
        conn=conn,
        imports_repo=MongoImportRepository(conn),
        employees_repo=MongoEmployeeRepository(conn),
        attendance_repo=MongoAttendanceRepository(conn),
        shifts_repo=MongoShiftRepository(conn),
        import_key=import_key,
        max_upload_bytes=max_upload_bytes,
    )
