from __future__ import annotations

from datetime import MAXYEAR, MINYEAR

from ..core.constants import ALLOWED_SPREADSHEET_MIME_TYPES
from ..core.exceptions import ValidationError


def too_large_message(max_bytes: int) -> str:
    return f"Arquivo muito grande. Tamanho máximo permitido: {max_bytes // (1024 * 1024)}MB"


def require_spreadsheet_mime(mimetype: str | None) -> str:
    if mimetype not in ALLOWED_SPREADSHEET_MIME_TYPES:
        raise ValidationError("Apenas arquivos .xls e .xlsx são permitidos")
    return mimetype


def require_max_size(payload: bytes, max_bytes: int) -> bytes:
    if len(payload) > max_bytes:
        raise ValidationError(too_large_message(max_bytes))
    return payload


def require_year(year: int) -> int:
    if not MINYEAR <= int(year) <= MAXYEAR:
        raise ValidationError(f"Ano inválido: {year}")
    return int(year)
