from __future__ import annotations

import io
import logging
from typing import Any

import pandas as pd

from ..core.constants import LEGACY_XLS_MIME_TYPE
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def engine_for(mimetype: str | None, filename: str | None = None) -> str:
    if mimetype == LEGACY_XLS_MIME_TYPE or (filename or "").lower().endswith(".xls"):
        return "xlrd"
    return "openpyxl"


def read_first_sheet(payload: bytes, *, mimetype: str | None = None, filename: str | None = None) -> list[dict[str, Any]]:
    """Parse the first worksheet into one dict per data row.

    The header row supplies the keys. Empty cells are left out of the row and
    fully blank rows are dropped.
    """

    engine = engine_for(mimetype, filename)
    try:
        df = pd.read_excel(io.BytesIO(payload), sheet_name=0, engine=engine)
    except Exception as e:
        logger.warning("Could not read workbook %s with %s: %s", filename, engine, e)
        raise ValidationError("Empty or invalid XLS file") from e

    df = df.dropna(how="all")
    rows: list[dict[str, Any]] = []
    for record in df.to_dict(orient="records"):
        rows.append({str(k).strip(): v for k, v in record.items() if not _is_missing(v)})
    return rows


def _is_missing(value: Any) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
