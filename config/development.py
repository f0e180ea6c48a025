from .config import Config

SECRET_KEY = Config.SECRET_KEY

# Required; put it in .env for local work
MONGODB_URI = Config.MONGODB_URI
MONGODB_DB = Config.MONGODB_DB

# Local runs fall back to a fixed key so the upload form works out of the box
IMPORT_KEY = Config.IMPORT_KEY or "dev-key"
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES
EXPORT_YEAR = Config.EXPORT_YEAR

DEBUG = True
LOG_LEVEL = Config.LOG_LEVEL

# If enabled, indexes are created on startup (idempotent)
AUTO_INIT_DB = Config.AUTO_INIT_DB
