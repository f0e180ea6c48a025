from __future__ import annotations

from typing import Protocol

from .model import ImportRecord


class ImportRepository(Protocol):
    def insert(self, record: ImportRecord) -> str:
        raise NotImplementedError
