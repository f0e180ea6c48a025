from __future__ import annotations

import importlib
import sys
from pathlib import Path

from dotenv import load_dotenv

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.xls_import.xls_import.database.bootstrap import ensure_indexes, list_collections
from src.xls_import.xls_import.database.connection import DatabaseConnection, MongoConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if not settings.MONGODB_URI:
        raise SystemExit("Please define the MONGODB_URI environment variable")

    conn = DatabaseConnection.get_instance(MongoConfig(uri=settings.MONGODB_URI, database=settings.MONGODB_DB))
    indexes = ensure_indexes(conn)
    print(f"OK: {len(indexes)} indexes ready on {settings.MONGODB_DB} (collections={list_collections(conn)})")


if __name__ == "__main__":
    main()
