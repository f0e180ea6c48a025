import os

SECRET_KEY = "test-secret"

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
MONGODB_DB = os.getenv("MONGODB_DB", "xls-import-test")

IMPORT_KEY = "test-import-key"
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
EXPORT_YEAR = 2026

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
