from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping

from pymongo.collection import Collection

from ..common.datetime_utils import as_utc
from ..core.enums import CollectionName
from .connection import DatabaseConnection


def created_between(start: datetime, end: datetime) -> Dict[str, Any]:
    """Filter on ingestion time (``createdAt``), both ends inclusive."""
    return {"createdAt": {"$gte": start, "$lte": end}}


def compact(doc: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None so optional fields stay absent."""
    return {k: v for k, v in doc.items() if v is not None}


def optional_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    return as_utc(value)


class MongoRepository:
    """Shared plumbing for the per-collection repositories."""

    collection_name: CollectionName

    def __init__(self, conn: DatabaseConnection):
        self._conn = conn

    @property
    def _collection(self) -> Collection:
        return self._conn.collection(self.collection_name)

    def _insert_documents(self, docs: Iterable[Mapping[str, Any]]) -> int:
        payload = [dict(d) for d in docs]
        if not payload:
            # insert_many rejects an empty batch.
            return 0
        result = self._collection.insert_many(payload, ordered=False)
        return len(result.inserted_ids)

    def _find_documents(self, query: Mapping[str, Any]) -> List[Dict[str, Any]]:
        return list(self._collection.find(dict(query), {"_id": 0}))
