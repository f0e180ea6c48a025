from .config import Config

SECRET_KEY = Config.SECRET_KEY

# No default: startup fails when MONGODB_URI is not set.
MONGODB_URI = Config.MONGODB_URI
MONGODB_DB = Config.MONGODB_DB

IMPORT_KEY = Config.IMPORT_KEY
MAX_UPLOAD_BYTES = Config.MAX_UPLOAD_BYTES
EXPORT_YEAR = Config.EXPORT_YEAR

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = Config.AUTO_INIT_DB
