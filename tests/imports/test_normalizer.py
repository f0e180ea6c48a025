from __future__ import annotations

from datetime import datetime, timezone

from src.xls_import.xls_import.core.enums import EventType
from src.xls_import.xls_import.imports.normalizer import RowNormalizer


def _normalizer() -> RowNormalizer:
    return RowNormalizer(id_factory=lambda: "imp-1")


def test_row_with_check_in_and_out_yields_two_events(fixed_now):
    result = _normalizer().normalize(
        [{"ID": "E1", "Nome": "Ana", "Data": "2026-01-05", "Entrada": "08:00", "Saída": "17:00"}],
        now=fixed_now,
    )

    assert len(result.employees) == 1
    assert [e.event_type for e in result.attendance_events] == [EventType.CHECK_IN, EventType.CHECK_OUT]
    assert len(result.shifts) == 1

    check_in, check_out = result.attendance_events
    assert check_in.check_in is not None and check_in.check_out is None
    assert check_out.check_out is not None and check_out.check_in is None


def test_all_records_share_import_id_and_created_at(fixed_now):
    result = _normalizer().normalize(
        [{"ID": "E1", "Entrada": "08:00"}, {"ID": "E2", "Saída": "18:00"}],
        now=fixed_now,
    )

    records = [*result.employees, *result.attendance_events, *result.shifts]
    assert {r.import_id for r in records} == {"imp-1"}
    assert {r.created_at for r in records} == {fixed_now}
    assert result.import_id == "imp-1"


def test_duplicate_employee_ids_keep_first_profile_but_all_shifts(fixed_now):
    result = _normalizer().normalize(
        [
            {"ID": "E1", "Nome": "Ana", "Departamento": "RH", "Entrada": "08:00"},
            {"ID": "E1", "Nome": "Ana Maria", "Departamento": "TI", "Entrada": "09:00"},
        ],
        now=fixed_now,
    )

    assert len(result.employees) == 1
    assert result.employees[0].name == "Ana"
    assert result.employees[0].department == "RH"
    assert len(result.attendance_events) == 2
    assert len(result.shifts) == 2
    assert result.duplicate_employee_rows == 1


def test_bad_row_is_skipped_entirely(fixed_now, caplog):
    result = _normalizer().normalize(
        [
            {"ID": "E1", "Entrada": "08:00", "Hora Início": "manhã"},
            {"ID": "E2"},
        ],
        now=fixed_now,
    )

    assert [e.employee_id for e in result.employees] == ["E2"]
    assert result.attendance_events == []
    assert [s.employee_id for s in result.shifts] == ["E2"]
    assert result.skipped_rows == 1
    assert "linha 0" in caplog.text


def test_missing_id_falls_back_to_row_index(fixed_now):
    result = _normalizer().normalize([{"Nome": "A"}, {"Nome": "B"}], now=fixed_now)
    assert [e.employee_id for e in result.employees] == ["0", "1"]


def test_shift_created_even_without_times(fixed_now):
    result = _normalizer().normalize([{"ID": "E1"}], now=fixed_now)

    (shift,) = result.shifts
    assert shift.shift_type == "custom"
    assert (shift.start_time, shift.end_time, shift.duration) == ("08:00", "17:00", 9)
    assert shift.date == fixed_now


def test_night_shift_duration(fixed_now):
    result = _normalizer().normalize(
        [{"ID": "E1", "Turno": "night", "Hora Início": "22:00", "Hora Fim": "06:00"}], now=fixed_now
    )
    assert result.shifts[0].duration == 8


def test_stats_keep_legacy_error_count(fixed_now):
    result = _normalizer().normalize(
        [{"ID": "E1"}, {"ID": "E1"}, {"ID": "E2", "Data": "???"}],
        now=fixed_now,
    )
    stats = result.stats()

    assert stats.total_rows == 3
    assert stats.imported_rows == 1
    assert stats.errors == 2
    assert stats.skipped_rows == 1
    assert stats.duplicate_employees == 1


def test_default_clock_and_id_are_used():
    normalizer = RowNormalizer(clock=lambda: datetime(2026, 5, 1, tzinfo=timezone.utc))
    result = normalizer.normalize([{"ID": "E1"}])

    assert result.employees[0].created_at == datetime(2026, 5, 1, tzinfo=timezone.utc)
    assert len(result.import_id) == 36


def test_numeric_hour_cells_are_truncated_not_skipped(fixed_now):
    result = _normalizer().normalize([{"ID": "E1", "Hora Início": 8.5, "Hora Fim": 17}], now=fixed_now)

    assert result.skipped_rows == 0
    assert result.shifts[0].start_time == "8.5"
    assert result.shifts[0].duration == 9
