from __future__ import annotations

import io
import sys
from datetime import datetime

import pytest

from src.xls_import.xls_import.common.datetime_utils import now_utc
from tests.helpers import IMPORT_KEY, XLSX_MIME, FailingCollection, InMemoryCollection, make_xlsx

HEADERS = ["ID", "Nome", "Departamento", "Data", "Entrada", "Saída", "Turno", "Hora Início", "Hora Fim"]


def _upload(client, payload: bytes, *, key=IMPORT_KEY, filename="ponto.xlsx", mimetype=XLSX_MIME):
    headers = {"x-import-key": key} if key is not None else {}
    return client.post(
        "/api/import-xls",
        data={"file": (io.BytesIO(payload), filename, mimetype)},
        headers=headers,
        content_type="multipart/form-data",
    )


def _one_row_sheet() -> bytes:
    return make_xlsx(
        HEADERS,
        [["E1", "Ana", "RH", datetime(2026, 1, 5), "08:00", "17:00", "morning", "08:00", "17:00"]],
    )


@pytest.mark.parametrize("key", [None, "wrong"])
def test_import_without_valid_key_is_401_and_writes_nothing(client, stores, key):
    resp = _upload(client, _one_row_sheet(), key=key)

    assert resp.status_code == 401
    assert resp.get_json()["ok"] is False
    assert all(not s.items for s in stores.values())


def test_import_without_file_is_400(client):
    resp = client.post("/api/import-xls", data={}, headers={"x-import-key": IMPORT_KEY})

    assert resp.status_code == 400
    assert resp.get_json() == {"ok": False, "error": "No file uploaded"}


def test_import_of_empty_sheet_is_400_before_any_write(client, stores):
    resp = _upload(client, make_xlsx(HEADERS, []))

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Empty or invalid XLS file"
    assert all(not s.items for s in stores.values())


def test_import_rejects_non_spreadsheet_mime(client):
    resp = _upload(client, b"ID,Nome\n1,Ana\n", filename="ponto.csv", mimetype="text/csv")
    assert resp.status_code == 400


def test_import_wrong_method_is_json_405(client):
    resp = client.get("/api/import-xls")

    assert resp.status_code == 405
    assert resp.get_json() == {"ok": False, "error": "Method not allowed"}


def test_import_then_year_round_trip(client):
    resp = _upload(client, _one_row_sheet())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ok"] is True
    assert body["importId"]
    assert body["stats"]["totalRows"] == 1
    assert body["stats"]["importedRows"] == 1
    assert body["stats"]["errors"] == 0

    year = now_utc().year
    data = client.get(f"/api/year/{year}").get_json()

    assert data["ok"] is True
    assert data["totalEmployees"] == 1
    assert data["totalShifts"] == 1
    assert data["totalAttendanceEvents"] == 2
    assert data["summary"]["employeesByDepartment"] == {"RH": 1}
    assert data["summary"]["shiftsByType"] == {"morning": 1}
    assert data["summary"]["averageShiftDuration"] == 9
    assert data["employees"][0]["name"] == "Ana"


def test_year_endpoint_wrong_method_is_405(client):
    resp = client.post("/api/year/2026")
    assert resp.status_code == 405
    assert resp.get_json()["ok"] is False


def test_year_endpoint_surfaces_query_failure(monkeypatch):
    from src.xls_import.xls_import.container import wire
    from src.xls_import.xls_import.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    failing = wire(
        conn=None,
        imports_repo=InMemoryCollection(),
        employees_repo=InMemoryCollection(),
        attendance_repo=InMemoryCollection(),
        shifts_repo=FailingCollection(),
        import_key=IMPORT_KEY,
    )

    resp = create_app(container=failing).test_client().get("/api/year/2026")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["ok"] is False
    assert body["details"] == "connection refused"


def test_export_download_headers(client):
    _upload(client, _one_row_sheet())
    year = now_utc().year

    resp = client.get(f"/api/exports/year{year}.ts")

    assert resp.status_code == 200
    assert resp.headers["Content-Disposition"] == f'attachment; filename="year{year}-data.ts"'
    assert resp.headers["Content-Type"].startswith("text/plain")
    text = resp.get_data(as_text=True)
    assert f"export const year{year}Data" in text
    assert '"employeeId": "E1"' in text


def test_export_wrong_method_is_405(client):
    assert client.delete("/api/exports/year2026.ts").status_code == 405


def test_index_page_renders_upload_form(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert 'type="file"' in html
    assert "/api/year/2026" in html
    assert "/api/exports/year2026.ts" in html


def test_create_app_requires_mongodb_uri(monkeypatch):
    from src.xls_import.xls_import.core.exceptions import ConfigurationError
    from src.xls_import.xls_import.main import create_app

    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("MONGODB_URI", "")
    # settings modules read the environment at import time
    monkeypatch.delitem(sys.modules, "config.production", raising=False)
    monkeypatch.delitem(sys.modules, "config.config", raising=False)

    with pytest.raises(ConfigurationError):
        create_app()


def test_upload_over_size_limit_is_json_400_and_writes_nothing(monkeypatch, stores):
    from src.xls_import.xls_import.container import wire
    from src.xls_import.xls_import.core.constants import MULTIPART_OVERHEAD_BYTES
    from src.xls_import.xls_import.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    small = wire(
        conn=None,
        imports_repo=stores["imports"],
        employees_repo=stores["employees"],
        attendance_repo=stores["attendance"],
        shifts_repo=stores["shifts"],
        import_key=IMPORT_KEY,
        max_upload_bytes=1024,
    )
    app = create_app(container=small)
    assert app.config["MAX_CONTENT_LENGTH"] == 1024 + MULTIPART_OVERHEAD_BYTES

    resp = _upload(app.test_client(), b"\0" * (1024 + MULTIPART_OVERHEAD_BYTES + 1))

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["ok"] is False
    assert body["error"].startswith("Arquivo muito grande")
    assert all(not s.items for s in stores.values())


@pytest.mark.parametrize("path", ["/api/year/0", "/api/exports/year0.ts"])
def test_year_zero_is_400(client, path):
    resp = client.get(path)

    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_markup_in_imported_text_is_returned_as_data_and_rendered_as_text(client):
    dept = '<img src=x onerror="alert(1)">'
    sheet = make_xlsx(
        HEADERS,
        [["E1", "<b>Ana</b>", dept, datetime(2026, 1, 5), "08:00", "17:00", "morning", "08:00", "17:00"]],
    )
    assert _upload(client, sheet).status_code == 200

    data = client.get(f"/api/year/{now_utc().year}").get_json()
    assert data["summary"]["employeesByDepartment"] == {dept: 1}
    assert data["employees"][0]["name"] == "<b>Ana</b>"

    # the page builds its result panels from DOM nodes, never from HTML strings
    html = client.get("/").get_data(as_text=True)
    assert "innerHTML" not in html
    assert "insertAdjacentHTML" not in html
    assert "textContent" in html


def test_index_error_box_shows_details(client):
    html = client.get("/").get_data(as_text=True)
    assert "data.details" in html
