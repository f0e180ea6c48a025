from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..common.datetime_utils import now_utc, to_iso_z
from ..common.serializers import employee_record, event_record, shift_record
from ..core.constants import UNSPECIFIED_DEPARTMENT
from ..reports.model import YearSnapshot
from ..reports.service import YearReportService

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


@dataclass(frozen=True)
class ExportDocument:
    filename: str
    content: str
    mimetype: str = "text/plain; charset=utf-8"


def _literal(items: list[dict[str, Any]]) -> str:
    return json.dumps(items, indent=2, ensure_ascii=False)


class TypeScriptExportService:
    """Render a year's raw records as an importable TypeScript module."""

    template_name = "exports/year_module.ts.j2"

    def __init__(self, reports: YearReportService, *, clock: Callable[[], datetime] = now_utc):
        self._reports = reports
        self._clock = clock
        self._env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, snap: YearSnapshot) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(
            year=snap.year,
            const_name=f"year{snap.year}Data",
            generated_at=to_iso_z(self._clock()),
            total_employees=len(snap.employees),
            total_attendance_events=len(snap.attendance_events),
            total_shifts=len(snap.shifts),
            employees_json=_literal([employee_record(e) for e in snap.employees]),
            attendance_events_json=_literal([event_record(ev) for ev in snap.attendance_events]),
            shifts_json=_literal([shift_record(s) for s in snap.shifts]),
            unspecified_department=UNSPECIFIED_DEPARTMENT,
        )

    def export_year(self, year: int) -> ExportDocument:
        # Runs its own queries; the year view's join is not reused.
        snap = self._reports.load_year(year)
        return ExportDocument(filename=f"year{year}-data.ts", content=self.render(snap))
