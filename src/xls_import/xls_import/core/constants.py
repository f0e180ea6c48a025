"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

ALLOWED_SPREADSHEET_MIME_TYPES = (
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
LEGACY_XLS_MIME_TYPE = "application/vnd.ms-excel"

DEFAULT_DATABASE_NAME = "xls-import-db"
DEFAULT_EXPORT_YEAR = 2026

DEFAULT_SHIFT_TYPE = "custom"
DEFAULT_START_TIME = "08:00"
DEFAULT_END_TIME = "17:00"
EMPLOYEE_NAME_TEMPLATE = "Funcionário {employee_id}"
UNSPECIFIED_DEPARTMENT = "Não especificado"

IMPORT_KEY_HEADER = "x-import-key"
# Room for multipart boundaries and part headers on top of the file itself.
MULTIPART_OVERHEAD_BYTES = 64 * 1024
