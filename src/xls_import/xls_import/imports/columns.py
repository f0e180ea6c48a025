"""Column aliases and value coercion for uploaded spreadsheets.

Spreadsheets arrive with Portuguese or English headers. Each logical field
lists its accepted headers in priority order; the first header holding a
present value wins. Rows are resolved into a typed ``SpreadsheetRow`` before
any record is built.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Mapping, Optional

import pandas as pd

from ..common.datetime_utils import as_utc
from ..core.constants import (
    DEFAULT_END_TIME,
    DEFAULT_SHIFT_TYPE,
    DEFAULT_START_TIME,
    EMPLOYEE_NAME_TEMPLATE,
)
from ..core.exceptions import RowNormalizationError

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "employee_id": ("ID", "employeeId", "Código"),
    "name": ("Nome", "name", "Funcionário"),
    "department": ("Departamento", "department"),
    "position": ("Cargo", "position"),
    "email": ("Email", "email"),
    "date": ("Data", "date"),
    "check_in": ("Entrada", "checkIn"),
    "check_out": ("Saída", "checkOut"),
    "shift_type": ("Turno", "shift", "shiftType"),
    "start_time": ("Hora Início", "startTime"),
    "end_time": ("Hora Fim", "endTime"),
}

# Excel stores dates as days since this epoch (1900 leap-year bug included).
EXCEL_EPOCH = datetime(1899, 12, 30, tzinfo=timezone.utc)

_CLOCK_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class SpreadsheetRow:
    employee_id: str
    name: str
    date: datetime
    shift_type: str
    start_time: str
    end_time: str
    department: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None


def is_present(value: Any) -> bool:
    """Truthy and not a pandas missing marker (None/NaN/NaT)."""
    if value is None:
        return False
    try:
        if pd.isna(value):
            return False
    except (TypeError, ValueError):
        pass
    return bool(value)


def first_present(raw: Mapping[str, Any], field: str) -> Any:
    for header in FIELD_ALIASES[field]:
        value = raw.get(header)
        if is_present(value):
            return value
    return None


def as_text(value: Any) -> str:
    # pandas widens integer columns with gaps to float: 7.0 -> "7"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_clock(value: Any) -> str:
    if isinstance(value, (datetime, time)):
        return value.strftime("%H:%M")
    return as_text(value)


def to_datetime(value: Any, *, on_date: Optional[datetime] = None) -> datetime:
    """Convert a spreadsheet cell into an aware UTC datetime.

    Time-only values need ``on_date`` to anchor them.
    """

    if isinstance(value, pd.Timestamp):
        return as_utc(value.to_pydatetime())
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if isinstance(value, time):
        return _anchor(value, on_date)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return EXCEL_EPOCH + timedelta(days=float(value))
    if isinstance(value, str):
        text = value.strip()
        if _CLOCK_RE.match(text):
            return _anchor(_parse_clock(text), on_date)
        try:
            return as_utc(datetime.fromisoformat(text))
        except ValueError:
            pass
        try:
            parsed = pd.to_datetime(text, dayfirst=True)
        except (ValueError, OverflowError) as e:
            raise RowNormalizationError(f"Invalid date value: {value!r}") from e
        if pd.isna(parsed):
            raise RowNormalizationError(f"Invalid date value: {value!r}")
        return as_utc(parsed.to_pydatetime())
    raise RowNormalizationError(f"Unsupported date value: {value!r}")


def _parse_clock(text: str) -> time:
    parts = [int(p) for p in text.split(":")]
    try:
        return time(parts[0], parts[1], parts[2] if len(parts) > 2 else 0)
    except ValueError as e:
        raise RowNormalizationError(f"Invalid time value: {text!r}") from e


def _anchor(clock: time, on_date: Optional[datetime]) -> datetime:
    if on_date is None:
        raise RowNormalizationError(f"Time {clock} has no date to attach to")
    return datetime.combine(on_date.date(), clock.replace(tzinfo=None), tzinfo=timezone.utc)


def hour_of(clock: str) -> int:
    """Hour component of ``HH:MM``, truncated like parseInt.

    Leading digits win, so "08:30", "8.5" and "8h" all give 8.
    """
    match = _LEADING_INT_RE.match(clock)
    if not match:
        raise RowNormalizationError(f"Invalid time value: {clock!r}")
    return int(match.group(1))


def shift_duration(start_time: str, end_time: str) -> int:
    """Whole hours between start and end, wrapping past midnight.

    An end hour that is not after the start hour is read as the next day,
    so equal hours give 24.
    """

    start_hour = hour_of(start_time)
    end_hour = hour_of(end_time)
    if end_hour > start_hour:
        return end_hour - start_hour
    return (24 - start_hour) + end_hour


def resolve_row(raw: Mapping[str, Any], *, index: int, now: datetime) -> SpreadsheetRow:
    employee_value = first_present(raw, "employee_id")
    employee_id = as_text(employee_value) if employee_value is not None else str(index)

    name_value = first_present(raw, "name")
    name = as_text(name_value) if name_value is not None else EMPLOYEE_NAME_TEMPLATE.format(employee_id=employee_id)

    def optional_text(field: str) -> Optional[str]:
        value = first_present(raw, field)
        return as_text(value) if value is not None else None

    date_value = first_present(raw, "date")
    row_date = to_datetime(date_value) if date_value is not None else now

    check_in_value = first_present(raw, "check_in")
    check_out_value = first_present(raw, "check_out")

    shift_value = first_present(raw, "shift_type")
    start_value = first_present(raw, "start_time")
    end_value = first_present(raw, "end_time")

    return SpreadsheetRow(
        employee_id=employee_id,
        name=name,
        department=optional_text("department"),
        position=optional_text("position"),
        email=optional_text("email"),
        date=row_date,
        check_in=to_datetime(check_in_value, on_date=row_date) if check_in_value is not None else None,
        check_out=to_datetime(check_out_value, on_date=row_date) if check_out_value is not None else None,
        shift_type=as_text(shift_value) if shift_value is not None else DEFAULT_SHIFT_TYPE,
        start_time=as_clock(start_value) if start_value is not None else DEFAULT_START_TIME,
        end_time=as_clock(end_value) if end_value is not None else DEFAULT_END_TIME,
    )
