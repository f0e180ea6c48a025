from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.xls_import.xls_import.container import Container, wire
from tests.helpers import IMPORT_KEY, InMemoryCollection


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def stores():
    return {
        "imports": InMemoryCollection(),
        "employees": InMemoryCollection(),
        "attendance": InMemoryCollection(),
        "shifts": InMemoryCollection(),
    }


@pytest.fixture
def container(stores) -> Container:
    return wire(
        conn=None,
        imports_repo=stores["imports"],
        employees_repo=stores["employees"],
        attendance_repo=stores["attendance"],
        shifts_repo=stores["shifts"],
        import_key=IMPORT_KEY,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.xls_import.xls_import.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
