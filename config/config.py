import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # MongoDB
    MONGODB_URI = os.environ.get("MONGODB_URI", "")
    MONGODB_DB = os.environ.get("MONGODB_DB", "xls-import-db")

    # Shared secret expected in the x-import-key header
    IMPORT_KEY = os.environ.get("IMPORT_KEY", "")
    MAX_UPLOAD_BYTES = int(os.environ.get("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

    EXPORT_YEAR = int(os.environ.get("EXPORT_YEAR", "2026"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Dev helpers
    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
