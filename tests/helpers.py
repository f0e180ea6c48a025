from __future__ import annotations

import io
from datetime import datetime

from openpyxl import Workbook

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
IMPORT_KEY = "test-import-key"


class InMemoryCollection:
    def __init__(self):
        self.items = []

    def insert_many(self, items) -> int:
        self.items.extend(items)
        return len(items)

    def insert(self, item) -> str:
        self.items.append(item)
        return item.import_id

    def list_created_between(self, *, start: datetime, end: datetime):
        return [i for i in self.items if start <= i.created_at <= end]


class FailingCollection(InMemoryCollection):
    def insert_many(self, items) -> int:
        raise RuntimeError("write concern failed")

    def list_created_between(self, *, start: datetime, end: datetime):
        raise RuntimeError("connection refused")


def make_xlsx(headers, rows) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.append(list(headers))
    for row in rows:
        ws.append(list(row))
    out = io.BytesIO()
    wb.save(out)
    return out.getvalue()
