from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_utc
from ..common.validators import require_max_size, require_spreadsheet_mime
from ..core.constants import MAX_UPLOAD_BYTES
from ..core.enums import ImportStatus
from ..core.exceptions import AuthenticationError, ValidationError
from ..employees.repository import EmployeeRepository
from ..shifts.repository import ShiftRepository
from .model import ImportRecord, NormalizationResult
from .normalizer import RowNormalizer
from .repository import ImportRepository
from .spreadsheet import read_first_sheet

logger = logging.getLogger(__name__)


class ImportService:
    def __init__(
        self,
        imports: ImportRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        *,
        import_key: Optional[str] = None,
        normalizer: Optional[RowNormalizer] = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._imports = imports
        self._employees = employees
        self._attendance = attendance
        self._shifts = shifts
        self._import_key = import_key
        self._normalizer = normalizer or RowNormalizer(clock=clock)
        self._max_upload_bytes = int(max_upload_bytes)
        self._clock = clock

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    def authorize(self, provided_key: Optional[str]) -> None:
        """Compare the request header with the configured shared secret.

        With no key configured every request is rejected.
        """
        if not provided_key or not self._import_key or provided_key != self._import_key:
            raise AuthenticationError("Unauthorized - Invalid import key")

    def import_upload(self, *, payload: bytes, filename: str, mimetype: Optional[str]) -> ImportRecord:
        require_spreadsheet_mime(mimetype)
        require_max_size(payload, self._max_upload_bytes)

        rows = read_first_sheet(payload, mimetype=mimetype, filename=filename)
        return self.import_rows(rows, filename=filename)

    def import_rows(self, rows: Sequence[Mapping[str, Any]], *, filename: str) -> ImportRecord:
        if not rows:
            raise ValidationError("Empty or invalid XLS file")

        result = self._normalizer.normalize(rows)
        record = ImportRecord(
            import_id=result.import_id,
            filename=filename,
            uploaded_at=self._clock(),
            stats=result.stats(),
            status=ImportStatus.COMPLETED,
        )
        self._persist(record, result)
        logger.info(
            "Import %s (%s): %d rows, %d employees, %d events, %d shifts",
            record.import_id,
            filename,
            result.total_rows,
            len(result.employees),
            len(result.attendance_events),
            len(result.shifts),
        )
        return record

    def _persist(self, record: ImportRecord, result: NormalizationResult) -> None:
        # Four independent writes, no transaction: a failure leaves the
        # others committed.
        with ThreadPoolExecutor(max_workers=4, thread_name_prefix="import-insert") as pool:
            futures = [
                pool.submit(self._imports.insert, record),
                pool.submit(self._employees.insert_many, result.employees),
                pool.submit(self._attendance.insert_many, result.attendance_events),
                pool.submit(self._shifts.insert_many, result.shifts),
            ]
            wait(futures)

        errors = [f.exception() for f in futures if f.exception() is not None]
        if errors:
            logger.error("Import %s partially written: %d of 4 inserts failed", record.import_id, len(errors))
            raise errors[0]
