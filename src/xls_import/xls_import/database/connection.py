from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from ..core.enums import CollectionName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MongoConfig:
    uri: str
    database: str


class DatabaseConnection:
    """Process-wide MongoDB handle.

    The client is created once by ``get_instance`` and handed to every
    repository explicitly. pymongo pools connections internally, so no
    per-operation connect is needed.
    """

    _instance: Optional["DatabaseConnection"] = None
    _lock = threading.Lock()

    def __init__(self, config: MongoConfig, client: MongoClient | None = None):
        self._config = config
        self._client = client or MongoClient(config.uri, tz_aware=True)
        self._db = self._client[config.database]

    @classmethod
    def get_instance(cls, config: MongoConfig) -> "DatabaseConnection":
        with cls._lock:
            if cls._instance is None:
                logger.info("Connecting to MongoDB database %s", config.database)
                cls._instance = DatabaseConnection(config)
            return cls._instance

    @property
    def db(self) -> Database:
        return self._db

    def collection(self, name: CollectionName | str) -> Collection:
        key = name.value if isinstance(name, CollectionName) else str(name)
        return self._db[key]
