from __future__ import annotations

from typing import Any, Dict

from ..core.enums import CollectionName
from ..database.mongo_base import MongoRepository, compact
from .model import ImportRecord
from .repository import ImportRepository


def to_document(r: ImportRecord) -> Dict[str, Any]:
    return compact(
        {
            "importId": r.import_id,
            "filename": r.filename,
            "uploadedAt": r.uploaded_at,
            "stats": r.stats.as_dict(),
            "status": r.status.value,
            "error": r.error,
        }
    )


class MongoImportRepository(MongoRepository, ImportRepository):
    collection_name = CollectionName.IMPORTS

    def insert(self, record: ImportRecord) -> str:
        self._collection.insert_one(to_document(record))
        return record.import_id
