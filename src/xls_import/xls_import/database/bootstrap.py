from __future__ import annotations

import logging

from pymongo import ASCENDING

from ..core.enums import CollectionName
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_RECORD_COLLECTIONS = (
    CollectionName.EMPLOYEES,
    CollectionName.ATTENDANCE_EVENTS,
    CollectionName.SHIFTS,
)


def ensure_indexes(conn: DatabaseConnection) -> list[str]:
    """Create the indexes the year queries and import lookups rely on.

    create_index is idempotent, so this is safe on every startup.
    """

    created: list[str] = []
    created.append(
        conn.collection(CollectionName.IMPORTS).create_index([("importId", ASCENDING)], unique=True)
    )
    for name in _RECORD_COLLECTIONS:
        coll = conn.collection(name)
        created.append(coll.create_index([("createdAt", ASCENDING)]))
        created.append(coll.create_index([("importId", ASCENDING)]))
        created.append(coll.create_index([("employeeId", ASCENDING)]))
    logger.info("Ensured %d indexes", len(created))
    return created


def list_collections(conn: DatabaseConnection) -> list[str]:
    return sorted(conn.db.list_collection_names())
